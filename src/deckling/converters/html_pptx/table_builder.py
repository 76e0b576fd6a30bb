"""
Table extraction and creation module

Extracts HTML tables into TableBlock values and renders them as PowerPoint
tables (border styling, merges, column widths).
"""
import logging
from typing import List, Optional, Dict, Tuple

from bs4 import Tag
from lxml import etree
from pptx.dml.color import RGBColor
from pptx.enum.text import PP_ALIGN, MSO_ANCHOR
from pptx.oxml.ns import qn
from pptx.util import Pt

from ...core.deck import TableBlock, TextStyle
from .config import (
    DEFAULT_TABLE_CONFIG,
    DEFAULT_BORDER_CONFIG,
    DEFAULT_COLORS,
    TableConfig,
    BorderConfig,
    ColorPalette
)
from .style_utils import PptxStyle, StyleExtractor, TextUtils

logger = logging.getLogger(__name__)


class TableDataExtractor:
    """Class that extracts data from HTML tables"""

    def __init__(self, table_elem: Tag):
        self.table_elem = table_elem
        self.rows_data: List[List[str]] = []
        self.header_rows: List[List[str]] = []
        self.body_rows: List[List[str]] = []
        self.col_widths_html: List[Optional[int]] = []
        self.merge_info: List[Tuple[int, int, int, int]] = []  # (row, col, colspan, rowspan)
        self.cell_styles: Dict[Tuple[int, int], TextStyle] = {}
        self.link_cells: List[Tuple[int, int]] = []
        self._pending_rowspans: Dict[int, int] = {}
        self.has_header = False
        self.max_cols = 0

    def extract(self) -> 'TableDataExtractor':
        """Extract table data"""
        thead = self.table_elem.find('thead')

        if thead:
            self.has_header = True
            for tr in thead.find_all('tr'):
                self._add_row(tr, header=True)

        body_rows = [
            tr for tr in self.table_elem.find_all('tr')
            if thead is None or tr.find_parent('thead') is not thead
        ]
        for idx, tr in enumerate(body_rows):
            # Without <thead>, leading rows made only of <th> count as header rows
            cells = tr.find_all(['th', 'td'], recursive=False)
            is_header = (
                thead is None
                and idx == len(self.header_rows)
                and bool(cells)
                and all(c.name == 'th' for c in cells)
            )
            if is_header:
                self.has_header = True
            self._add_row(tr, header=is_header)

        if self.rows_data:
            self.max_cols = max(len(row) for row in self.rows_data)
            for row in self.rows_data:
                while len(row) < self.max_cols:
                    row.append("")

        return self

    def _add_row(self, tr: Tag, header: bool) -> None:
        row_data = self._extract_row_data(tr, len(self.rows_data))
        if header:
            self.header_rows.append(row_data)
        else:
            self.body_rows.append(row_data)
        self.rows_data.append(row_data)

        if not self.col_widths_html:
            cells = tr.find_all(['th', 'td'], recursive=False)
            self.col_widths_html = StyleExtractor.extract_column_widths(cells)

    def _extract_row_data(self, tr: Tag, row_idx: int) -> List[str]:
        """Extract row data (including colspan handling)"""
        cells = tr.find_all(['th', 'td'], recursive=False)
        row_data = []
        col_idx = 0

        for cell in cells:
            # Skip columns still covered by a rowspan from a previous row
            while self._pending_rowspans.get(col_idx, 0) > 0:
                row_data.append('')
                col_idx += 1

            text = TextUtils.extract_cell_text_with_formatting(cell)
            colspan = _span(cell.get('colspan'))
            rowspan = _span(cell.get('rowspan'))
            if rowspan > 1:
                for offset in range(colspan):
                    self._pending_rowspans[col_idx + offset] = rowspan

            style = StyleExtractor.extract_text_style(cell)
            if style != TextStyle():
                self.cell_styles[(row_idx, col_idx)] = style
            if cell.find('a'):
                self.link_cells.append((row_idx, col_idx))

            row_data.append(text)
            for _ in range(colspan - 1):
                row_data.append('')

            if colspan > 1 or rowspan > 1:
                self.merge_info.append((row_idx, col_idx, colspan, rowspan))

            col_idx += colspan

        while self._pending_rowspans.get(col_idx, 0) > 0:
            row_data.append('')
            col_idx += 1

        self._pending_rowspans = {
            col: remaining - 1
            for col, remaining in self._pending_rowspans.items()
            if remaining > 1
        }
        return row_data

    def to_block(self) -> TableBlock:
        """Freeze extracted data into a TableBlock"""
        return TableBlock(
            rows=tuple(tuple(row) for row in self.rows_data),
            header_count=len(self.header_rows),
            merges=tuple(self.merge_info),
            col_widths=tuple(self.col_widths_html),
            cell_styles=tuple(sorted(self.cell_styles.items())),
            link_cells=tuple(self.link_cells),
        )


def _span(value) -> int:
    try:
        return max(int(value), 1)
    except (TypeError, ValueError):
        return 1


class TableBorderStyler:
    """Class that applies table border styles"""

    def __init__(
        self,
        border_config: BorderConfig = None,
        colors: ColorPalette = None
    ):
        self.border_config = border_config or DEFAULT_BORDER_CONFIG
        self.colors = colors or DEFAULT_COLORS

    def apply_academic_borders(
        self,
        ppt_table,
        header_count: int,
        row_count: int,
        col_count: int
    ) -> None:
        """Apply academic paper style borders (thick lines at top/bottom, thick line below header)"""
        thick_line = self.border_config.thick_line
        thin_line = self.border_config.thin_line
        no_line = self.border_config.no_line

        black = self.colors['black']
        gray_line = self.colors['gray_line']

        for i in range(row_count):
            for j in range(col_count):
                cell = ppt_table.cell(i, j)

                if i == 0:
                    top = (thick_line, black)
                elif i == header_count and header_count > 0:
                    top = (no_line, black)
                else:
                    top = (thin_line, gray_line)

                if i == row_count - 1 or (i == header_count - 1 and header_count > 0):
                    bottom = (thick_line, black)
                else:
                    bottom = (thin_line, gray_line)

                # Each border is inserted at position 0: apply in reverse schema order (lnL, lnR, lnT, lnB)
                self._set_cell_border(cell, 'bottom', *bottom)
                self._set_cell_border(cell, 'top', *top)
                self._set_cell_border(cell, 'right', no_line, black)
                self._set_cell_border(cell, 'left', no_line, black)

    def _set_cell_border(self, cell, side: str, width: int, color: RGBColor) -> None:
        """Set specific border of a cell"""
        tc = cell._tc
        tcPr = tc.get_or_add_tcPr()

        border_map = {
            'top': 'a:lnT',
            'bottom': 'a:lnB',
            'left': 'a:lnL',
            'right': 'a:lnR'
        }

        border_elem_name = border_map.get(side)
        if not border_elem_name:
            return

        for existing in list(tcPr):
            if existing.tag == qn(border_elem_name):
                tcPr.remove(existing)

        width_emu = int(width) if width > 0 else 0

        ln = etree.Element(qn(border_elem_name))

        if width_emu > 0:
            ln.set('w', str(width_emu))
            ln.set('cap', 'flat')
            ln.set('cmpd', 'sng')
            ln.set('algn', 'ctr')

            solidFill = etree.SubElement(ln, qn('a:solidFill'))
            srgbClr = etree.SubElement(solidFill, qn('a:srgbClr'))
            srgbClr.set('val', str(color))

            prstDash = etree.SubElement(ln, qn('a:prstDash'))
            prstDash.set('val', 'solid')
        else:
            ln.set('w', '0')
            etree.SubElement(ln, qn('a:noFill'))

        tcPr.insert(0, ln)


class TableColumnAdjuster:
    """Class that adjusts table column widths"""

    @staticmethod
    def apply_html_widths(
        ppt_table,
        col_widths_html: Tuple[Optional[int], ...],
        total_width: int
    ) -> None:
        """Apply width attributes extracted from HTML (scaled to the table width)"""
        col_count = min(len(col_widths_html), len(ppt_table.columns))
        widths = list(col_widths_html[:col_count])
        specified = [w for w in widths if w is not None]
        if not specified:
            return

        unspecified_count = widths.count(None) + (len(ppt_table.columns) - col_count)
        specified_portion = 1.0 if unspecified_count == 0 else 0.7
        total_specified = sum(specified) or 1

        for j, html_width in enumerate(widths):
            if html_width is not None:
                ppt_table.columns[j].width = int(
                    total_width * specified_portion * html_width / total_specified
                )

        if unspecified_count > 0:
            equal_width = int(total_width * (1 - specified_portion) / unspecified_count)
            for j in range(len(ppt_table.columns)):
                if j >= col_count or widths[j] is None:
                    ppt_table.columns[j].width = equal_width

    @staticmethod
    def auto_adjust(ppt_table, rows: Tuple[Tuple[str, ...], ...], total_width: int) -> None:
        """Auto-adjust column widths based on text length"""
        col_count = len(ppt_table.columns)
        if col_count == 0:
            return

        max_lengths = [0] * col_count
        for row in rows:
            for j, cell in enumerate(row[:col_count]):
                longest_line = max((len(line) for line in str(cell).split('\n')), default=0)
                max_lengths[j] = max(max_lengths[j], longest_line)

        min_proportion = 0.08
        total_length = sum(max_lengths)

        if total_length == 0:
            for j in range(col_count):
                ppt_table.columns[j].width = total_width // col_count
            return

        proportions = [max(length / total_length, min_proportion) for length in max_lengths]
        scale = sum(proportions)
        for j in range(col_count):
            ppt_table.columns[j].width = int(total_width * proportions[j] / scale)


class TableBuilder:
    """Class that creates PowerPoint tables"""

    def __init__(
        self,
        table_config: TableConfig = None,
        colors: ColorPalette = None
    ):
        self.table_config = table_config or DEFAULT_TABLE_CONFIG
        self.colors = colors or DEFAULT_COLORS
        self.border_styler = TableBorderStyler(colors=self.colors)

    def estimate_height(self, table: TableBlock) -> int:
        """Estimate rendered table height"""
        line_counts = [
            max((str(cell).count('\n') + 1 for cell in row), default=1)
            for row in table.rows
        ]
        return self.table_config.row_height_estimate * sum(line_counts)

    def create_table(
        self,
        slide,
        table: TableBlock,
        left: int,
        top: int,
        width: int,
        height: int
    ):
        """Create PowerPoint table from a TableBlock"""
        if not table.rows or table.col_count == 0:
            return None

        max_cols = table.col_count
        row_count = len(table.rows)
        header_count = table.header_count
        cell_styles = dict(table.cell_styles)
        link_cells = set(table.link_cells)

        if row_count > 15 or max_cols > 6:
            base_font_size = self.table_config.small_font_size
            header_font_size = Pt(self.table_config.small_font_size.pt + 1)
        else:
            base_font_size = self.table_config.body_font_size
            header_font_size = self.table_config.header_font_size

        height = max(min(self.table_config.min_row_height * row_count, height),
                     self.table_config.min_row_height)

        ppt_table = slide.shapes.add_table(
            row_count, max_cols,
            left, top, width, height
        ).table

        for i, row_data in enumerate(table.rows):
            for j in range(max_cols):
                cell_data = row_data[j] if j < len(row_data) else ""

                cell = ppt_table.cell(i, j)
                cell.text = str(cell_data)
                cell.vertical_anchor = MSO_ANCHOR.MIDDLE

                cell.margin_left = self.table_config.cell_margin
                cell.margin_right = self.table_config.cell_margin
                cell.margin_top = self.table_config.cell_margin_vertical
                cell.margin_bottom = self.table_config.cell_margin_vertical

                style = cell_styles.get((i, j), TextStyle())
                if style.background:
                    cell.fill.solid()
                    cell.fill.fore_color.rgb = PptxStyle.rgb(style.background)
                else:
                    cell.fill.background()

                for paragraph in cell.text_frame.paragraphs:
                    if i < header_count:
                        paragraph.font.size = PptxStyle.font_size(style, header_font_size)
                        paragraph.font.bold = True
                        paragraph.font.color.rgb = PptxStyle.rgb(style.color) or self.colors['black']
                        paragraph.alignment = PptxStyle.alignment(style.align) or PP_ALIGN.CENTER
                    else:
                        paragraph.font.size = PptxStyle.font_size(style, base_font_size)
                        paragraph.font.bold = style.bold
                        paragraph.font.italic = style.italic
                        paragraph.font.color.rgb = PptxStyle.rgb(style.color) or self.colors['text']

                        if (i, j) in link_cells:
                            paragraph.font.color.rgb = self.colors['link_blue']
                            paragraph.font.underline = True

                        if style.align:
                            paragraph.alignment = PptxStyle.alignment(style.align)
                        elif '•' in cell_data or '\n' in cell_data:
                            paragraph.alignment = PP_ALIGN.LEFT
                        else:
                            paragraph.alignment = PP_ALIGN.CENTER

                    paragraph.line_spacing = 1.1

                cell.text_frame.word_wrap = True

        self.border_styler.apply_academic_borders(
            ppt_table, header_count, row_count, max_cols
        )

        for row_idx, col_idx, colspan, rowspan in table.merges:
            if row_idx >= row_count or col_idx >= max_cols:
                continue
            end_row = min(row_idx + rowspan - 1, row_count - 1)
            end_col = min(col_idx + colspan - 1, max_cols - 1)
            if (end_row, end_col) == (row_idx, col_idx):
                continue
            covered = [
                ppt_table.cell(r, c)
                for r in range(row_idx, end_row + 1)
                for c in range(col_idx, end_col + 1)
            ]
            if any(c.is_merge_origin or c.is_spanned for c in covered):
                logger.debug(f"Skipping overlapping merge at ({row_idx}, {col_idx})")
                continue
            ppt_table.cell(row_idx, col_idx).merge(ppt_table.cell(end_row, end_col))

        if table.col_widths and any(w is not None for w in table.col_widths):
            TableColumnAdjuster.apply_html_widths(ppt_table, table.col_widths, width)
        else:
            TableColumnAdjuster.auto_adjust(ppt_table, table.rows, width)

        return ppt_table
