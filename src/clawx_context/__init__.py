"""ClawX workspace context synchronizer.

Injects app-owned context sections into the bootstrap documents that the
OpenClaw gateway seeds inside each agent workspace (AGENTS.md, TOOLS.md, ...).

Managed sections are demarcated:
    <!-- clawx:begin -->
    ...
    <!-- clawx:end -->

Anything outside these markers belongs to the gateway and is preserved
untouched.
"""

__version__ = "0.1.0"

# Marker constants used by section, sync and the repair pass
CLAWX_BEGIN = "<!-- clawx:begin -->"
CLAWX_END = "<!-- clawx:end -->"

TEMPLATE_SUFFIX = ".clawx.md"
DOCUMENT_SUFFIX = ".md"
