"""Tailwind @source sync for monorepos.

Keeps a generated region of Tailwind v4 stylesheets in step with the
workspace project graph, so the Tailwind compiler scans the sources of
every project an app depends on, not only its own root.

Generated regions are demarcated:
    /* nx-tailwind-sources:start */
    @source "../../../libs/ui";
    /* nx-tailwind-sources:end */

Anything outside these markers is preserved untouched.
"""

__version__ = "0.3.0"

# Marker constants used by the merger and the sync
START_MARKER = "/* nx-tailwind-sources:start */"
END_MARKER = "/* nx-tailwind-sources:end */"
