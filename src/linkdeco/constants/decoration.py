"""Rule vocabulary, delimiter convention and CSS class names."""

from __future__ import annotations

import re

from linkdeco.types.common import Position, Target

TARGET_TAG: Target = "tag"
TARGET_FRONTMATTER: Target = "frontmatter"
TARGET_METADATA: Target = "metadata"
VALID_TARGETS: frozenset[str] = frozenset({TARGET_TAG, TARGET_FRONTMATTER, TARGET_METADATA})

POSITION_BEFORE: Position = "before"
POSITION_AFTER: Position = "after"
VALID_POSITIONS: frozenset[str] = frozenset({POSITION_BEFORE, POSITION_AFTER})

DEFAULT_TARGET: Target = TARGET_TAG
DEFAULT_POSITION: Position = POSITION_AFTER

EXPRESSION_DELIMITER: str = "`"
EXPRESSION_PATTERN: re.Pattern[str] = re.compile(r"`(.+)`", re.DOTALL)

TAG_ROOT_MARKER: str = "#"
TAG_PATH_SEPARATOR: str = "/"
UNTITLED_NAME: str = "Untitled"

DEFAULT_EXPRESSION_ARGUMENT: str = "value"
SCRIPT_RESULT_CLASSNAME_KEY: str = "classname"
SCRIPT_RESULT_ICON_KEY: str = "icon"
SCRIPT_RESULT_TEXT_KEY: str = "text"

DECORATION_ID_PREFIX: str = "lmd-"
DECORATION_ID_LENGTH: int = 16

CLASS_DECORATION: str = "lmd-decoration"
CLASS_POSITION_PREFIX: str = "lmd-pos-"
CLASS_ICON: str = "lmd-icon"
CLASS_EDITING: str = "lmd-editing"
CLASS_LINK_TEXT_READING: str = "lmd-link-text-rv"
CLASS_LINK_TEXT_LIVE_PREVIEW: str = "lmd-link-text-lp"
DECORATION_ID_ATTRIBUTE: str = "data-lmd-id"
ICON_ATTRIBUTE: str = "data-icon"
