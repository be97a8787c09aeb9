from django.test import SimpleTestCase

from activeform import hints, html
from activeform.config import HintSettings
from activeform.constants import TYPE_RADIO
from activeform.toggles import ToggleItemRenderer, flatten_choices, render_toggle_list, selected_values


class HtmlTests(SimpleTestCase):
    def test_add_css_class_is_idempotent(self):
        attrs = {"class": "a"}
        html.add_css_class(attrs, "b a")
        html.add_css_class(attrs, ["b", "c"])
        self.assertEqual(attrs["class"], "a b c")

    def test_remove_css_class(self):
        attrs = {"class": "a b"}
        html.remove_css_class(attrs, "a")
        self.assertEqual(attrs["class"], "b")
        html.remove_css_class(attrs, ["b"])
        self.assertNotIn("class", attrs)

    def test_merge_attrs_appends_classes(self):
        merged = html.merge_attrs({"class": "a", "id": "x"}, {"class": "b", "id": "y"})
        self.assertEqual(merged, {"class": "a b", "id": "y"})

    def test_add_css_style(self):
        attrs = {"style": "color: red; height: 1px"}
        html.add_css_style(attrs, "height:2px;width:3px")
        self.assertEqual(attrs["style"], "color:red;height:2px;width:3px")
        html.add_css_style(attrs, "color:blue", overwrite=False)
        self.assertIn("color:red", attrs["style"])

    def test_tags(self):
        self.assertHTMLEqual(html.tag("div", "<b>x</b>", {"class": "c", "hidden": True}), '<div class="c" hidden><b>x</b></div>')
        self.assertEqual(html.tag("input", "ignored", {"checked": False}), "<input>")


class HintTests(SimpleTestCase):
    def test_data_attributes(self):
        attrs = hints.data_attributes(HintSettings(container="#f"))
        self.assertEqual(attrs["data-placement"], "top")
        self.assertEqual(attrs["data-hide-on-escape"], 1)
        self.assertEqual(attrs["data-container"], "#f")
        self.assertEqual(attrs["data-viewport"], '{"selector": "body", "padding": 0}')
        self.assertNotIn("data-title", attrs)

    def test_resolve_settings(self):
        settings = hints.resolve_settings(HintSettings(), 3)
        self.assertEqual(settings.icon, '<i class="glyphicon glyphicon-question-sign text-info"></i>')
        self.assertEqual(settings.container, "form")
        self.assertEqual(hints.resolve_settings(HintSettings(icon_beside_input=True), 5).container, "table")

    def test_input_template(self):
        settings = hints.resolve_settings(HintSettings(icon_beside_input=True), 5)
        template = hints.input_template(settings, "id_name-table")
        self.assertIn('id="id_name-table"', template)
        self.assertIn("{input}", template)
        self.assertEqual(hints.input_template(hints.resolve_settings(HintSettings(), 5)), "")

    def test_label_without_icon(self):
        settings = HintSettings(show_icon=False, on_label_click=True, on_label_hover=False)
        self.assertHTMLEqual(
            hints.hintable_label(settings, "Name"),
            '<span class="kv-type-label kv-hintable kv-hint-click">Name</span>',
        )


class ToggleTests(SimpleTestCase):
    def test_flatten_choices(self):
        choices = [("a", "A"), ("Group", [("b", "B"), ("c", "C")])]
        self.assertEqual(list(flatten_choices(choices)), [("a", "A"), ("b", "B"), ("c", "C")])

    def test_selected_values(self):
        self.assertEqual(selected_values(None), set())
        self.assertEqual(selected_values(1), {"1"})
        self.assertEqual(selected_values(["a", 2]), {"a", "2"})

    def test_bootstrap3_items(self):
        item = ToggleItemRenderer(TYPE_RADIO, 3, list_id="id_c")
        self.assertHTMLEqual(
            item(0, "Red", "c", True, "r"),
            '<div class="radio"><label><input type="radio" name="c" value="r" data-index="0" id="id_c-0" checked> Red</label></div>',
        )
        inline = ToggleItemRenderer(TYPE_RADIO, 3, list_id="id_c", inline=True)
        self.assertHTMLEqual(
            inline(1, "Green", "c", False, "g"),
            '<label class="radio-inline"><input type="radio" name="c" value="g" data-index="1" id="id_c-1"> Green</label>',
        )

    def test_bootstrap4_custom_items(self):
        item = ToggleItemRenderer("checkbox", 4, list_id="id_t", custom=True)
        self.assertHTMLEqual(
            item(0, "A", "t", False, "a"),
            '<div class="custom-control custom-checkbox">'
            '<input type="checkbox" name="t" value="a" data-index="0" id="id_t-0" class="custom-control-input">'
            '<label class="custom-control-label" for="id_t-0">A</label></div>',
        )

    def test_item_labels_are_escaped(self):
        item = ToggleItemRenderer("checkbox", 5, list_id="id_t")
        self.assertIn("&lt;b&gt;", item(0, "<b>", "t", False, "a"))

    def test_render_toggle_list(self):
        markup = render_toggle_list(
            [("a", "A"), ("b", "B")], "t", ["b"], lambda i, label, name, checked, value: f"[{label}:{checked}]", {"id": "t"}, " "
        )
        self.assertEqual(markup, '<div id="t">[A:False] [B:True]</div>')
