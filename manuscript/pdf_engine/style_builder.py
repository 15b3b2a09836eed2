"""
Font management and style building utilities for PDF rendering.

This module handles:
- Font file discovery and registration
- Font family mapping so inline <b>/<i> markup picks the right face
- ReportLab ParagraphStyle creation from template specs
"""

import os
from pathlib import Path
from typing import Dict, Optional, List, Tuple

from reportlab.lib.styles import ParagraphStyle
from reportlab.lib.enums import TA_CENTER
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.pdfbase.pdfmetrics import registerFontFamily

from .templates.base import PdfTemplate, FontSpec, ParagraphSpec
from config.logging_config import get_logger
from config.settings import settings


logger = get_logger(__name__)

# (regular, bold, italic, bold_italic)
FontVariants = Tuple[str, str, str, str]


class FontManager:
    """
    Manages font registration for ReportLab.

    Handles:
    - Font file discovery across multiple paths
    - TTF font registration with ReportLab
    - Font family mapping (regular, bold, italic, bold_italic)
    """

    # Default search paths for fonts
    DEFAULT_SEARCH_PATHS = [
        # System paths (Linux)
        '/usr/share/fonts/truetype/dejavu/',
        '/usr/share/fonts/TTF/',
        '/usr/local/share/fonts/',

        # User paths
        os.path.expanduser('~/.fonts/'),
        os.path.expanduser('~/.local/share/fonts/'),

        # macOS paths
        '/Library/Fonts/',
        os.path.expanduser('~/Library/Fonts/'),
    ]

    # Standard PDF fonts, always available without embedding
    BUILTIN_FAMILIES: Dict[str, FontVariants] = {
        'Helvetica': ('Helvetica', 'Helvetica-Bold', 'Helvetica-Oblique', 'Helvetica-BoldOblique'),
        'Times-Roman': ('Times-Roman', 'Times-Bold', 'Times-Italic', 'Times-BoldItalic'),
        'Courier': ('Courier', 'Courier-Bold', 'Courier-Oblique', 'Courier-BoldOblique'),
    }

    # DejaVu covers accented Latin and most symbols found in manuscripts
    TTF_FAMILIES: Dict[str, FontVariants] = {
        'DejaVuSerif': ('DejaVuSerif', 'DejaVuSerif-Bold', 'DejaVuSerif-Italic', 'DejaVuSerif-BoldItalic'),
        'DejaVuSans': ('DejaVuSans', 'DejaVuSans-Bold', 'DejaVuSans-Oblique', 'DejaVuSans-BoldOblique'),
    }

    FALLBACK_FAMILIES = {
        'DejaVuSerif': 'Times-Roman',
        'DejaVuSans': 'Helvetica',
    }

    def __init__(self, additional_paths: Optional[List[str]] = None):
        """
        Initialize FontManager.

        Args:
            additional_paths: Extra paths to search for fonts
                (defaults to settings.get_font_dirs())
        """
        if additional_paths is None:
            additional_paths = settings.get_font_dirs()
        self.search_paths = [str(p) for p in additional_paths] + list(self.DEFAULT_SEARCH_PATHS)

        self._registered_fonts: Dict[str, str] = {}
        self._font_cache: Dict[str, str] = {}
        self._family_map: Dict[str, str] = {}

    def find_font_file(self, filename: str) -> Optional[str]:
        """
        Find a font file in search paths.

        Args:
            filename: Font filename (e.g., 'DejaVuSerif.ttf')

        Returns:
            Full path to font file, or None if not found
        """
        if filename in self._font_cache:
            return self._font_cache[filename]

        for search_path in self.search_paths:
            path = Path(search_path) / filename
            if path.exists():
                self._font_cache[filename] = str(path)
                return str(path)

        logger.debug(f"Font file not found: {filename}")
        return None

    def register_font(self, font_name: str, font_file: str) -> bool:
        """
        Register a single TTF font with ReportLab.

        Returns:
            True if registration successful
        """
        if font_name in self._registered_fonts:
            return True

        font_path = self.find_font_file(font_file)
        if not font_path:
            return False

        try:
            pdfmetrics.registerFont(TTFont(font_name, font_path))
        except Exception as e:
            logger.error(f"Failed to register font {font_name}: {e}")
            return False

        self._registered_fonts[font_name] = font_path
        logger.debug(f"Registered font: {font_name} from {font_path}")
        return True

    def register_family(self, family: str) -> str:
        """
        Make a family usable and return the family name to render with.

        Built-in families need no work. TTF families are registered with
        all four variants; if any file is missing the standard fallback
        family is used instead.
        """
        if family in self._family_map:
            return self._family_map[family]

        resolved = family
        if family in self.TTF_FAMILIES:
            variants = self.TTF_FAMILIES[family]
            if all(self.register_font(name, f"{name}.ttf") for name in variants):
                regular, bold, italic, bold_italic = variants
                registerFontFamily(
                    family, normal=regular, bold=bold,
                    italic=italic, boldItalic=bold_italic
                )
            else:
                resolved = self.FALLBACK_FAMILIES[family]
                logger.warning(f"{family} fonts not found, using {resolved}")
        elif family not in self.BUILTIN_FAMILIES:
            logger.warning(f"Unknown font family {family}, using Helvetica")
            resolved = 'Helvetica'

        self._family_map[family] = resolved
        return resolved

    def register_template_fonts(self, template: PdfTemplate):
        """Register every family a template's styles refer to."""
        families = {spec.font.family for spec in template.get_styles().values()}
        families.add(template.get_footer().font.family)
        for family in sorted(families):
            self.register_family(family)

    def get_font_name(self, font: FontSpec) -> str:
        """Concrete face for a FontSpec (may come from a fallback family)."""
        family = self.register_family(font.family)
        variants = self.BUILTIN_FAMILIES.get(family) or self.TTF_FAMILIES[family]
        regular, bold, italic, bold_italic = variants

        if font.bold and font.italic:
            return bold_italic
        if font.bold:
            return bold
        if font.italic:
            return italic
        return regular


class StyleBuilder:
    """
    Builds ReportLab ParagraphStyles from template specifications.

    Converts ParagraphSpec dataclasses to ReportLab-compatible styles.
    """

    def __init__(self, template: PdfTemplate, font_manager: Optional[FontManager] = None):
        self.template = template
        self.font_manager = font_manager or FontManager()
        self._styles: Dict[str, ParagraphStyle] = {}

    def build_paragraph_style(
        self,
        name: str,
        spec: ParagraphSpec
    ) -> ParagraphStyle:
        """
        Build a ReportLab ParagraphStyle from a ParagraphSpec.

        Args:
            name: Style name
            spec: Paragraph specification

        Returns:
            ReportLab ParagraphStyle
        """
        font = spec.font

        return ParagraphStyle(
            name=name,
            fontName=self.font_manager.get_font_name(font),
            fontSize=font.size,
            leading=font.leading,
            textColor=font.color,
            alignment=spec.alignment,
            spaceBefore=spec.space_before,
            spaceAfter=spec.space_after,
            firstLineIndent=spec.first_line_indent,
            leftIndent=spec.left_indent,
            rightIndent=spec.right_indent,
            keepWithNext=spec.keep_with_next,
            allowWidows=spec.allow_widows,
            allowOrphans=spec.allow_orphans,
        )

    def build_all_styles(self) -> Dict[str, ParagraphStyle]:
        """
        Build all styles defined in the template.

        Returns:
            Dict mapping style names to ParagraphStyles
        """
        if self._styles:
            return self._styles

        for name, spec in self.template.get_styles().items():
            self._styles[name] = self.build_paragraph_style(name, spec)

        return self._styles

    def get_footer_style(self) -> ParagraphStyle:
        """Style for the page-number footer."""
        font = self.template.get_footer().font

        return ParagraphStyle(
            name='footer',
            fontName=self.font_manager.get_font_name(font),
            fontSize=font.size,
            leading=font.leading,
            textColor=font.color,
            alignment=TA_CENTER,
        )
