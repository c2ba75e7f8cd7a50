"""Metadata template rendering.

Templates are plain text with {{token}} placeholders. The XML is treated as
opaque text: it is neither parsed nor validated here.
"""

import logging
import re
from pathlib import Path
from typing import Mapping

from realme_auth.utils.exceptions import TemplateLoadError

logger = logging.getLogger(__name__)


class MetadataRenderer:
    """Replaces {{token}} placeholders in a template file.

    Substitution is a single pass over the original template, so a value that
    itself contains {{...}} is never substituted again. Placeholders without a
    value are left untouched; templates may contain double-brace sequences
    that belong to RealMe rather than to this renderer.

    Example:
        >>> renderer = MetadataRenderer()
        >>> renderer.render_text("<e id='{{entityID}}'/>", {"entityID": "https://x/a/b"})
        "<e id='https://x/a/b'/>"
    """

    PLACEHOLDER_PATTERN = re.compile(r"{{([^{}]+)}}")

    def render(self, template_path: Path, tokens: Mapping[str, str]) -> str:
        """Load a template file and substitute tokens.

        Args:
            template_path: Path to the template file
            tokens: Mapping of token name (without braces) to replacement text

        Returns:
            Template text with every known token replaced

        Raises:
            TemplateLoadError: If the template cannot be read
        """
        try:
            template = template_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise TemplateLoadError(
                f"Can't read metadata template at {template_path}: {e}"
            ) from e

        logger.debug(f"Loaded metadata template: {template_path}")
        return self.render_text(template, tokens)

    def render_text(self, template: str, tokens: Mapping[str, str]) -> str:
        """Substitute tokens in template text."""

        def replacer(match: re.Match[str]) -> str:
            name = match.group(1)
            if name in tokens:
                return str(tokens[name])
            logger.debug(f"Leaving unresolved placeholder: {match.group(0)}")
            return match.group(0)

        return self.PLACEHOLDER_PATTERN.sub(replacer, template)
