"""mdxlint - Deterministic linter for Mintlify MDX documentation.

mdxlint validates MDX sources against structural and stylistic rules (frontmatter,
heading hierarchy, code-block annotations, component attributes, comment syntax and
internal links) so that authors and CI catch formatting defects before publication.
"""

__version__ = "0.1.0"
__author__ = "rpapub"
__email__ = "contact@rpapub.dev"
__description__ = "Deterministic linter for Mintlify MDX documentation"

from mdxlint.config import MdxlintConfig

__all__ = [
    "__version__",
    "__author__",
    "__email__",
    "__description__",
    "MdxlintConfig",
]
