"""Fixed lookup tables describing Mintlify components.

Tables are built once at import time and exposed read-only.
"""

import re
from types import MappingProxyType

# Components that must carry specific attributes.
REQUIRED_ATTRIBUTES = MappingProxyType({
    "Step": ("title",),
    "Tab": ("title",),
    "Accordion": ("title",),
    "Card": ("title",),
    "ParamField": ("type",),
    "ResponseField": ("name", "type"),
})

# Container component -> expected child component. Containers are tracked while
# scanning but parent/child pairing is not enforced.
PARENT_CHILD = MappingProxyType({
    "Steps": "Step",
    "Tabs": "Tab",
    "AccordionGroup": "Accordion",
})

# Callout components, in the order their pluralized typos are reported.
CALLOUTS = ("Warning", "Note", "Tip", "Info", "Check")

# Pluralized callout tag -> valid singular tag.
CALLOUT_TYPOS = MappingProxyType({f"<{name}s>": f"<{name}>" for name in CALLOUTS})

RECOGNIZED_TAGS = (
    "Step",
    "Tab",
    "Accordion",
    "Card",
    "CardGroup",
    "ParamField",
    "ResponseField",
    "Frame",
    "Steps",
    "Tabs",
    "AccordionGroup",
)

CARD_GROUP = "CardGroup"
CARD_GROUP_COLUMNS = "cols"
IMAGE_WRAPPER = "Frame"
CODE_GROUP = "CodeGroup"

OPEN_TAG_RE = re.compile(
    r"<(" + "|".join(RECOGNIZED_TAGS) + r")(\s[^>]*)?/?>"
)

IMAGE_EXTENSIONS = ("png", "jpg", "jpeg", "gif", "svg", "webp")
