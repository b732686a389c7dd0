import pytest

from html2react.core.converter import HandlerKind, TagAttributeMapper, rewrite_attributes
from html2react.core.converter.tag_mapper import LINK_IMPORT
from html2react.core.models import TagRecord, TranspilationContext


class TestGenericRewrite:
    """The attribute pass applied to every tag."""

    def test_style_and_event_handlers_dropped(self, props_map):
        result = rewrite_attributes(
            {"style": "color: red", "onclick": "go()", "onMouseOver": "x()", "id": "a"}, props_map
        )
        assert result == {"id": "a"}

    @pytest.mark.parametrize("attributes", [
        {"class": "btn", "id": "go", "data-x": "1"},
        {"for": "email", "tabindex": "2"},
        {"href": "#top", "title": "Top"},
        {},
    ])
    def test_only_listed_names_renamed_values_and_order_kept(self, props_map, attributes):
        result = rewrite_attributes(attributes, props_map)

        assert list(result.values()) == list(attributes.values())
        assert list(result.keys()) == [props_map.get(name, name) for name in attributes]
        assert not any(k == "style" or k.startswith("on") for k in result)

    def test_unlisted_attributes_pass_through(self):
        assert rewrite_attributes({"aria-label": "Close"}, {}) == {"aria-label": "Close"}


class TestHandlerDispatch:

    @pytest.mark.parametrize("record, expected", [
        (TagRecord("a", {"href": "x"}), HandlerKind.HYPERLINK),
        (TagRecord("img"), HandlerKind.IMAGE),
        (TagRecord("script"), HandlerKind.SCRIPT),
        (TagRecord("style"), HandlerKind.STYLE),
        (TagRecord("link", {"rel": "stylesheet"}), HandlerKind.STYLESHEET_LINK),
        (TagRecord("link", {"rel": "Stylesheet "}), HandlerKind.STYLESHEET_LINK),
        (TagRecord("link", {"rel": "icon"}), None),
        (TagRecord("div"), None),
    ])
    def test_handler_kind(self, record, expected):
        assert TagAttributeMapper.handler_kind(record) is expected


class TestHyperlinks:

    def test_internal_link_becomes_router_target(self, project, context, props_map):
        project.write("about.html", "<p>About</p>")
        outcome = TagAttributeMapper(context, props_map).map([TagRecord("a", {"href": "about.html"})])

        assert outcome.results[0].attributes == {"to": "about"}
        assert outcome.imports == [LINK_IMPORT]

    def test_link_import_added_once_per_document(self, project, context, props_map):
        project.write("about.html")
        project.write("contact.html")
        records = [
            TagRecord("a", {"href": "about.html"}),
            TagRecord("a", {"href": "contact.html", "class": "nav"}),
            TagRecord("a", {"href": "about.html"}),
        ]
        outcome = TagAttributeMapper(context, props_map).map(records)

        assert outcome.imports.count(LINK_IMPORT) == 1
        assert outcome.results[1].attributes == {"to": "contact", "className": "nav"}

    def test_external_link_unchanged(self, context, props_map):
        records = [TagRecord("a", {"href": "https://example.com"}), TagRecord("a", {"href": "#top"})]
        outcome = TagAttributeMapper(context, props_map).map(records)

        assert outcome.results[0].attributes == {"href": "https://example.com"}
        assert outcome.results[1].attributes == {"href": "#top"}
        assert outcome.imports == []

    def test_index_and_directory_links(self, project, context, props_map):
        project.write("index.html")
        project.write("blog/index.html")
        project.write("about/team.html")
        records = [
            TagRecord("a", {"href": "index.html"}),
            TagRecord("a", {"href": "blog/"}),
            TagRecord("a", {"href": "blog/index.html"}),
            TagRecord("a", {"href": "about/team.html"}),
        ]
        results = TagAttributeMapper(context, props_map).map(records).results

        assert [r.attributes["to"] for r in results] == ["/", "blog", "blog", "about/team"]

    def test_links_from_nested_document(self, project, props_map):
        project.write("index.html")
        project.write("blog/post.html")
        context = TranspilationContext(project.src, project.dest, relative_dir="blog")
        records = [TagRecord("a", {"href": "../index.html"}), TagRecord("a", {"href": "post.html"})]
        results = TagAttributeMapper(context, props_map).map(records).results

        assert [r.attributes["to"] for r in results] == ["/", "blog/post"]


class TestAssetsAndAuxiliaryTags:

    def test_internal_image_gets_placeholder(self, project, context, props_map):
        project.write_bytes("logo.png")
        outcome = TagAttributeMapper(context, props_map).map(
            [TagRecord("img", {"src": "logo.png", "alt": "Logo", "class": "brand"})]
        )

        assert outcome.results[0].attributes == {"src": "{logo_png}", "alt": "Logo", "className": "brand"}
        assert outcome.imports == ['import logo_png from "./logo.png";']
        assert outcome.variables == ["logo_png"]

    def test_external_or_missing_image_src(self, context, props_map):
        records = [TagRecord("img", {"src": "https://x.test/a.png"}), TagRecord("img", {"alt": "none"})]
        results = TagAttributeMapper(context, props_map).map(records).results

        assert results[0].attributes == {"src": "https://x.test/a.png"}
        assert results[1].attributes == {"alt": "none"}

    def test_inline_script_deleted(self, context, props_map):
        result = TagAttributeMapper(context, props_map).map([TagRecord("script")]).results[0]
        assert result.is_delete
        assert result.tag == "script"

    def test_external_script_resolved_like_image(self, project, context, props_map):
        project.write("js/app.js", "init();")
        records = [TagRecord("script", {"src": "js/app.js"}), TagRecord("script", {"src": "//cdn.test/x.js"})]
        outcome = TagAttributeMapper(context, props_map).map(records)

        assert outcome.results[0].attributes == {"src": "{js_app_js}"}
        assert outcome.results[1].attributes == {"src": "//cdn.test/x.js"}

    def test_style_always_deleted(self, context, props_map):
        outcome = TagAttributeMapper(context, props_map).map([TagRecord("style", {"media": "print"})])
        assert outcome.results[0].is_delete

    def test_stylesheet_link_becomes_import_and_is_deleted(self, project, context, props_map):
        project.write("site.css", "body {}")
        records = [
            TagRecord("link", {"rel": "stylesheet", "href": "site.css"}),
            TagRecord("link", {"rel": "stylesheet", "href": "https://fonts.test/f.css"}),
        ]
        outcome = TagAttributeMapper(context, props_map).map(records)

        assert all(r.is_delete for r in outcome.results)
        assert outcome.imports == ['import "./site.css";']
        assert outcome.variables == []

    def test_other_link_tags_pass_through(self, context, props_map):
        result = TagAttributeMapper(context, props_map).map(
            [TagRecord("link", {"rel": "icon", "href": "favicon.ico"})]
        ).results[0]
        assert result.attributes == {"rel": "icon", "href": "favicon.ico"}


def test_results_parallel_to_records(project, context, props_map):
    project.write_bytes("logo.png")
    records = [
        TagRecord("html"),
        TagRecord("head"),
        TagRecord("style"),
        TagRecord("body", {"class": "page"}),
        TagRecord("img", {"src": "logo.png"}),
        TagRecord("script"),
        TagRecord("p", {"onclick": "x()"}),
    ]
    results = TagAttributeMapper(context, props_map).map(records).results

    assert len(results) == len(records)
    assert [r.tag for r in results] == [r.tag for r in records]
    assert sum(1 for r in results if r.tag == "style" and not r.is_delete) == 0
