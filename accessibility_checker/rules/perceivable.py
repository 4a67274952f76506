"""
Perceivable checks: text alternatives, media, text resizing and contrast.
"""

import logging
import re
from typing import Optional

from ..contrast import MIN_CONTRAST_RATIO, contrast_ratio
from ..document import Document
from ..issue import Principle, Severity
from ..rule_base import Emitter, Rule
from ..utils import attribute_value, has_own_text, uses_px_unit, with_attribute

logger = logging.getLogger(__name__)

ALT_TEXT_PLACEHOLDER = "Description of image"

_LENGTH_TOKEN = re.compile(r"^[\d.]+[a-z%]+$", re.IGNORECASE)


def check_image_alt_text(document: Document, emitter: Emitter):
    """Images without an alt attribute. `alt=""` marks a decorative image and passes."""
    for index, img in enumerate(document.find_all("img")):
        if not img.has_attr("alt"):
            emitter.emit_for(index, img, fix=with_attribute(img, "alt", ALT_TEXT_PLACEHOLDER))


def check_media_controls(document: Document, emitter: Emitter):
    """Video and audio elements without the controls attribute."""
    for index, media in enumerate(document.find_all(["video", "audio"])):
        if not media.has_attr("controls"):
            emitter.emit_for(
                index, media,
                description=f"{media.name.upper()} element missing controls attribute",
                fix=with_attribute(media, "controls", ""),
            )


def check_media_captions(document: Document, emitter: Emitter):
    """Video and audio elements without a captions track."""
    for index, media in enumerate(document.find_all(["video", "audio"])):
        if document.select_one('track[kind="captions"]', media) is None:
            emitter.emit_for(index, media, description=f"{media.name.upper()} missing captions track")


def check_audio_description(document: Document, emitter: Emitter):
    """Videos without an audio description track."""
    for index, media in enumerate(document.find_all(["video", "audio"])):
        if media.name != "video":
            continue
        if document.select_one('track[kind="descriptions"]', media) is None:
            emitter.emit_for(index, media)


def _shorthand_font_size(value: Optional[str]) -> Optional[str]:
    """The size part of a `font` shorthand, without any `/line-height`."""
    for token in (value or "").split():
        size = token.split("/", 1)[0]
        if _LENGTH_TOKEN.match(size):
            return size
    return None


def check_text_resizing(document: Document, emitter: Emitter):
    """Stylesheet rules that fix font-size in pixels, directly or through `font`."""
    for sheet in document.stylesheets:
        if not sheet.available:
            continue
        for rule in sheet.rules:
            if uses_px_unit(rule.get("font-size")) or uses_px_unit(_shorthand_font_size(rule.get("font"))):
                emitter.emit(f"{sheet.index}-{rule.rule_index}", rule.selector_text)


def check_color_contrast(document: Document, emitter: Emitter):
    """Text whose color does not contrast enough with its background."""
    for index, element in enumerate(document.elements()):
        if not has_own_text(element):
            continue
        foreground = document.computed_style(element).color
        background = document.effective_background(element)
        if not foreground or not background:
            continue
        ratio = contrast_ratio(background, foreground)
        if ratio < MIN_CONTRAST_RATIO:
            logger.debug("Contrast %.2f:1 on <%s> (%s on %s)", ratio, element.name, foreground, background)
            emitter.emit_for(
                index, element,
                message=(
                    f"Text color does not provide sufficient contrast with background "
                    f"({ratio:.2f}:1, minimum {MIN_CONTRAST_RATIO}:1)"
                ),
            )


def check_images_of_text(document: Document, emitter: Emitter):
    """Images whose alt text is a single word, which suggests an image of text."""
    for index, img in enumerate(document.find_all("img")):
        alt = attribute_value(img, "alt")
        if alt and not any(ch.isspace() for ch in alt):
            emitter.emit_for(index, img)


RULES = (
    Rule(
        name="img-alt",
        issue_type="Missing Alt Text",
        principle=Principle.PERCEIVABLE,
        severity=Severity.SERIOUS,
        check=check_image_alt_text,
        description="Image is missing alt text, which is required for screen readers",
        wcag="1.1.1",
    ),
    Rule(
        name="media-controls",
        issue_type="Missing Media Controls",
        principle=Principle.PERCEIVABLE,
        severity=Severity.SERIOUS,
        check=check_media_controls,
        description="Media element missing controls attribute",
        wcag="1.2.1",
    ),
    Rule(
        name="media-captions",
        issue_type="Missing Media Captions",
        principle=Principle.PERCEIVABLE,
        severity=Severity.SERIOUS,
        check=check_media_captions,
        description="Media element missing captions track",
        wcag="1.2.2",
    ),
    Rule(
        name="video-audio-description",
        issue_type="Missing Audio Description",
        principle=Principle.PERCEIVABLE,
        severity=Severity.SERIOUS,
        check=check_audio_description,
        description="Video missing audio description track (WCAG 2.0 AA 1.2.5)",
        wcag="1.2.5",
    ),
    Rule(
        name="text-resize",
        issue_type="Fixed Font Size",
        principle=Principle.PERCEIVABLE,
        severity=Severity.MODERATE,
        check=check_text_resizing,
        description="Fixed font size may prevent text resizing",
        wcag="1.4.4",
    ),
    Rule(
        name="color-contrast",
        issue_type="Low Color Contrast",
        principle=Principle.PERCEIVABLE,
        severity=Severity.SERIOUS,
        check=check_color_contrast,
        description="Text color does not provide sufficient contrast with background (WCAG 2.0 AA 1.4.3)",
        wcag="1.4.3",
    ),
    Rule(
        name="image-text",
        issue_type="Image of Text",
        principle=Principle.PERCEIVABLE,
        severity=Severity.MODERATE,
        check=check_images_of_text,
        description="Image appears to contain text that should be actual text (WCAG 2.0 AA 1.4.5)",
        wcag="1.4.5",
    ),
)
