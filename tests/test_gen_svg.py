"""Tests for sectors/gen_svg.py and planar/svg.py SVG generation."""
import re
import pytest
from planar.geometry import DegenerateShapeError
from planar.svg import num, svg_points, line_el, text_el
from sectors.construction import Sectors
from sectors.gen_svg import (
    render_svg, write_svg, draw_line, draw_polygon, draw_text, draw_grid, draw_labels,
)
from sectors.style import DiagramConfig, LIGHT, DARK, ALPHA_D_STYLE, SECTOR_STYLE


def _group(doc, name):
    """Contents of the <g class="name"> layer."""
    m = re.search(rf'<g class="{name}"[^>]*>(.*?)</g>', doc, re.S)
    assert m, f"Missing layer {name}"
    return m.group(1)


# ============================================================
# Element helpers
# ============================================================

class TestNum:
    def test_integral(self):
        assert num(13.0) == "13"
        assert num(10) == "10"

    def test_fraction(self):
        assert num(9.5) == "9.5"
        assert num(111 / 11) == "10.0909"

    def test_negative_zero(self):
        assert num(-0.0) == "0"
        assert num(-0.00001) == "0"


class TestElements:
    def test_svg_points(self):
        assert svg_points([(7, 1), (9.5, 5)]) == "7,1 9.5,5"

    def test_line_dash(self):
        el = line_el(((0, 0), (1, 1)), "blue", 0.06, (0.1,))
        assert 'stroke-dasharray="0.1"' in el
        assert 'stroke-width="0.06"' in el

    def test_line_solid_has_no_dash(self):
        assert "stroke-dasharray" not in line_el(((0, 0), (1, 1)), "black", 0.33)

    def test_text_escapes(self):
        el = text_el((0, 0), "a < b & c", "start", "auto", "black", 0.3)
        assert "a &lt; b &amp; c" in el


class TestDrawHelpers:
    def test_draw_line_uses_palette(self):
        out = []
        draw_line(out, ((0, 0), (1, 2)), ALPHA_D_STYLE, DARK)
        assert len(out) == 1
        assert 'stroke="lightblue"' in out[0]

    def test_draw_polygon(self):
        out = []
        draw_polygon(out, [(0, 0), (1, 0), (0, 1)], SECTOR_STYLE, LIGHT)
        assert out[0].startswith("<polygon")
        assert 'points="0,0 1,0 0,1"' in out[0]
        assert 'fill="none"' in out[0]

    def test_draw_polygon_too_few_points(self):
        out = []
        with pytest.raises(DegenerateShapeError):
            draw_polygon(out, [(0, 0), (1, 1)], SECTOR_STYLE, LIGHT)
        assert out == []

    def test_draw_text_anchor_table(self):
        out = []
        draw_text(out, (4, 13), "D (4,13)", "bottomLeft", "black")
        assert 'x="3.75" y="13.25"' in out[0]
        assert 'text-anchor="end"' in out[0]
        assert 'dominant-baseline="hanging"' in out[0]

    def test_draw_text_center(self):
        out = []
        draw_text(out, (2, 3), "mid", "center", "black")
        assert 'x="2" y="3"' in out[0]
        assert 'dominant-baseline="central"' in out[0]

    def test_draw_grid_counts(self):
        out = []
        draw_grid(out, 4, LIGHT)
        joined = "\n".join(out)
        assert joined.count("<line") == 10
        assert joined.count("<text") == 25
        assert f'stroke="{LIGHT.grid}"' in joined

    def test_draw_grid_hidden(self):
        out = []
        draw_grid(out, 2, LIGHT, visible=False)
        assert out[0] == '<g class="grid" display="none">'
        assert out[-1] == '</g>'

    def test_draw_labels(self, construction):
        out = []
        draw_labels(out, construction, LIGHT)
        joined = "\n".join(out)
        assert joined.count("<line") == 3
        assert joined.count("stroke-dasharray") == 3
        assert "Θ = (χ,ψ,ω)" in joined


# ============================================================
# Full document
# ============================================================

class TestRenderSvg:
    def test_document_frame(self, svg_doc):
        assert svg_doc.startswith('<svg xmlns="http://www.w3.org/2000/svg" width="2000" height="2000"')
        assert 'viewBox="0 0 14 14"' in svg_doc
        assert svg_doc.endswith("</svg>")

    def test_three_sector_polygons(self, svg_doc):
        sectors = _group(svg_doc, "sectors")
        assert sectors.count("<polygon") == 3

    def test_top_sector_points(self, svg_doc):
        assert 'points="7,1 9.5,5 6,10.0909 3.5476,6.5238"' in svg_doc

    def test_layer_order(self, svg_doc):
        assert svg_doc.index('class="sectors"') < svg_doc.index('class="grid"') < svg_doc.index('class="labels"')

    def test_theta_label(self, svg_doc):
        assert "(6, 10.09)" in svg_doc

    def test_grid_layer(self, svg_doc):
        grid = _group(svg_doc, "grid")
        assert grid.count("<line") == 30
        assert ">14,14</text>" in grid

    def test_layers_visible_by_default(self, svg_doc):
        assert 'display="none"' not in svg_doc

    def test_hide_grid(self, construction):
        doc = render_svg(construction, DiagramConfig(show_grid=False))
        assert '<g class="grid" display="none">' in doc
        assert '<g class="labels">' in doc

    def test_hide_labels(self, construction):
        doc = render_svg(construction, DiagramConfig(show_labels=False))
        assert '<g class="labels" display="none">' in doc
        assert '<g class="grid">' in doc

    def test_dark_scheme(self, construction):
        doc = render_svg(construction, DiagramConfig(dark=True))
        assert f'fill="{DARK.background}"' in doc
        assert 'stroke="lightblue"' in doc
        assert 'fill="white"' in doc

    def test_dark_scheme_keeps_geometry(self, construction, svg_doc):
        dark = render_svg(construction, DiagramConfig(dark=True))
        pts = re.compile(r'points="([^"]*)"')
        assert pts.findall(dark) == pts.findall(svg_doc)

    def test_separation_moves_top_sector(self, construction):
        doc = render_svg(construction, DiagramConfig(separation=0.5))
        assert 'points="7,0.5 9.5,4.5 6,9.5909 3.5476,6.0238"' in doc

    def test_grid_size_config(self, construction):
        doc = render_svg(construction, DiagramConfig(grid_size=16, ratio=800))
        assert 'viewBox="0 0 16 16"' in doc
        assert 'width="800"' in doc
        assert _group(doc, "grid").count("<line") == 34

    def test_deterministic(self, construction, svg_doc):
        assert render_svg(construction, DiagramConfig()) == svg_doc


class TestWriteSvg:
    def test_writes_file(self, construction, tmp_path):
        path = tmp_path / "sectors.svg"
        write_svg(str(path), construction)
        content = path.read_text(encoding="utf-8")
        assert content.startswith("<svg")
        assert "Sector Right" in content

    def test_degenerate_sector_aborts_without_output(self, construction, tmp_path):
        bad = construction._replace(sectors=Sectors(
            top=construction.sectors.top[:2],
            right=construction.sectors.right,
            left=construction.sectors.left,
        ))
        path = tmp_path / "bad.svg"
        with pytest.raises(DegenerateShapeError):
            write_svg(str(path), bad)
        assert not path.exists()
