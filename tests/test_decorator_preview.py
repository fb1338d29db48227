"""
Decorator and preview tests

Tests the md-* class hooks and the bounded-line preview.
"""

import pytest

from mdlite.config import appsettings
from mdlite.lib.decorator import Decorator, tags_decorate
from mdlite.lib.renderer import renderer


MARKER = '<p class="md-preview-more">...</p>'


class TestDecorator:
    """Test class hook decoration"""

    def test_header(self):
        assert renderer.render_withClasses("# T") == '<h1 class="md-h1">T</h1>'

    def test_inline_tags(self):
        html = renderer.render_withClasses("**b** *i* ~~d~~ `c`")
        assert html == (
            '<p class="md-paragraph"><strong class="md-bold">b</strong> '
            '<em class="md-italic">i</em> <del class="md-strikethrough">d</del> '
            '<code class="md-code">c</code></p>'
        )

    def test_link(self):
        assert renderer.render_withClasses("[x](u)") == (
            '<p class="md-paragraph"><a class="md-link" href="u">x</a></p>'
        )

    def test_lists(self):
        assert renderer.render_withClasses("- a") == '<ul class="md-list">\n<li>a</li>\n</ul>'
        assert renderer.render_withClasses("1. a") == '<ol class="md-list-ordered">\n<li>a</li>\n</ol>'

    def test_code_block_and_rule(self):
        assert tags_decorate("<pre><code>x</code></pre><hr>") == (
            '<pre class="md-codeblock"><code class="md-code">x</code></pre><hr class="md-hr">'
        )

    def test_blockquote_and_image(self):
        assert tags_decorate('<blockquote><img src="a.png" alt="a"></blockquote>') == (
            '<blockquote class="md-blockquote"><img class="md-image" src="a.png" alt="a"></blockquote>'
        )

    def test_untouched_tags(self):
        """Tags without a hook, and tags that already carry attributes, stay as they are"""
        html = '<li>a<br></li><p class="x">b</p>'
        assert tags_decorate(html) == html

    def test_custom_prefix(self):
        assert Decorator(class_prefix="x-").decorate("<p>t</p>") == '<p class="x-paragraph">t</p>'

    def test_inline_with_classes(self):
        assert renderer.render_inlineWithClasses("# T") == '<h1 class="md-h1">T</h1>'


class TestPreview:
    """Test bounded-line previews"""

    def test_truncated(self):
        """Five lines previewed at three get exactly one marker"""
        html = renderer.preview("l1\nl2\nl3\nl4\nl5", 3)
        assert html == '<p class="md-paragraph">l1<br>l2<br>l3</p>' + MARKER
        assert html.count(MARKER) == 1

    def test_short_input_identical_to_full_render(self):
        source = "# Title\n- item"
        assert renderer.preview(source, 3) == renderer.render_withClasses(source)

    def test_exact_length_has_no_marker(self):
        assert MARKER not in renderer.preview("a\nb\nc", 3)

    def test_default_line_cap(self):
        source = "\n".join(f"line {n}" for n in range(appsettings.preview_max_lines + 2))
        html = renderer.preview(source)
        assert html.endswith(MARKER)
        assert f"line {appsettings.preview_max_lines - 1}" in html
        assert f"line {appsettings.preview_max_lines}<" not in html

    def test_list_cut_mid_way_stays_balanced(self):
        html = renderer.preview("- a\n  - b\n  - c\n- d", 2)
        assert html.count("<ul") == html.count("</ul>") == 2

    @pytest.mark.parametrize("source", ["", None, 7])
    def test_empty(self, source):
        assert renderer.preview(source, 3) == ""

    @pytest.mark.parametrize("max_lines", [0, -2])
    def test_non_positive_cap_keeps_no_lines(self, max_lines):
        assert renderer.preview("a\nb\nc", max_lines) == MARKER
