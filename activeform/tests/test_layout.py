from django.test import SimpleTestCase

from activeform.config import FieldLayoutOverride, FormLayoutConfig
from activeform.constants import SCREEN_READER, LayoutType
from activeform.layout import LayoutResolver, resolve_layout


def horizontal(**options):
    return FormLayoutConfig(layout_type=LayoutType.HORIZONTAL, **options)


class LayoutResolutionTests(SimpleTestCase):
    def test_every_layout_type_resolves_display_flags(self):
        for layout_type in LayoutType.values:
            with self.subTest(layout_type=layout_type):
                layout = resolve_layout(FormLayoutConfig(layout_type=layout_type))
                self.assertIsNotNone(layout.show_labels)
                self.assertIsNotNone(layout.show_errors)
                self.assertIsNotNone(layout.show_hints)

    def test_resolve_is_idempotent(self):
        resolver = LayoutResolver(horizontal(label_span=4, device_size="sm"))
        override = FieldLayoutOverride(show_hints=False, horizontal_css_classes={"label": "text-end"})
        self.assertEqual(resolver.resolve(override, True), resolver.resolve(override, True))

    def test_horizontal_grid_classes(self):
        layout = resolve_layout(horizontal(label_span=3, device_size="md", show_labels=True))
        self.assertEqual(layout.label_css, "col-md-3")
        self.assertEqual(layout.input_css, "col-md-9")
        self.assertEqual(layout.offset_css, "offset-md-3")

    def test_hidden_labels_give_full_width_input(self):
        layout = resolve_layout(horizontal(label_span=3, device_size="md", show_labels=False))
        self.assertEqual(layout.input_css, "col-md-12")

    def test_full_width_input_for_any_span_when_labels_hidden(self):
        for show_labels in (False, SCREEN_READER):
            for span in (1, 3, 6, 11, 12, 20):
                with self.subTest(show_labels=show_labels, span=span):
                    config = horizontal(label_span=span, device_size="lg", show_labels=show_labels)
                    self.assertEqual(resolve_layout(config).input_css, "col-lg-12")

    def test_unset_span_defaults_to_two_columns(self):
        layout = resolve_layout(horizontal())
        self.assertEqual(layout.label_css, "col-md-2")
        self.assertEqual(layout.input_css, "col-md-10")

    def test_span_out_of_range_is_clamped_to_full_width(self):
        for span in (12, 15):
            with self.subTest(span=span):
                layout = resolve_layout(horizontal(label_span=span))
                self.assertEqual(layout.label_span, 12)
                self.assertEqual(layout.label_css, "col-md-12")
                self.assertEqual(layout.input_css, "col-md-12")

    def test_custom_full_span(self):
        layout = resolve_layout(horizontal(label_span=4, full_span=16))
        self.assertEqual(layout.input_css, "col-md-12")
        self.assertEqual(layout.full_css, "col-md-16")

    def test_unset_device_size_defaults_to_medium(self):
        layout = resolve_layout(horizontal(label_span=3))
        self.assertEqual(layout.device_size, "md")
        self.assertEqual(layout.label_css, "col-md-3")

    def test_tiny_device_size_prefixes(self):
        layout = resolve_layout(horizontal(label_span=3, device_size="xs"))
        self.assertEqual(layout.label_css, "col-3")
        self.assertEqual(layout.offset_css, "offset-3")

    def test_bootstrap3_grid_and_offset_classes(self):
        layout = resolve_layout(horizontal(label_span=3, bs_version=3))
        self.assertEqual(layout.label_css, "col-md-3")
        self.assertEqual(layout.input_css, "col-md-9")
        self.assertEqual(layout.offset_css, "col-md-offset-3")

    def test_field_override_wins_over_form_config(self):
        config = horizontal(label_span=3)
        layout = resolve_layout(config, FieldLayoutOverride(label_span=4, device_size="sm"))
        self.assertEqual(layout.label_css, "col-sm-4")
        self.assertEqual(layout.input_css, "col-sm-8")

    def test_wrapper_with_grid_class_replaces_input_css(self):
        override = FieldLayoutOverride(horizontal_css_classes={"wrapper": "col-sm-8"})
        layout = resolve_layout(horizontal(label_span=3), override)
        self.assertEqual(layout.input_css, "col-sm-8")

    def test_wrapper_without_grid_class_is_appended(self):
        override = FieldLayoutOverride(horizontal_css_classes={"wrapper": "my-wrap"})
        layout = resolve_layout(horizontal(label_span=3), override)
        self.assertEqual(layout.input_css, "col-md-9 my-wrap")

    def test_hidden_labels_override_grid_wrapper(self):
        override = FieldLayoutOverride(horizontal_css_classes={"wrapper": "col-sm-8"})
        for show_labels in (False, SCREEN_READER):
            with self.subTest(show_labels=show_labels):
                layout = resolve_layout(horizontal(label_span=3, show_labels=show_labels), override)
                self.assertEqual(layout.input_css, "col-md-12")

    def test_hidden_labels_override_plain_wrapper(self):
        override = FieldLayoutOverride(show_labels=False, horizontal_css_classes={"wrapper": "my-wrap"})
        layout = resolve_layout(horizontal(label_span=3), override)
        self.assertEqual(layout.input_css, "col-md-12")

    def test_horizontal_css_sub_keys_are_appended(self):
        override = FieldLayoutOverride(
            horizontal_css_classes={"label": "text-end", "offset": "mt-2", "error": "small", "hint": "muted"}
        )
        layout = resolve_layout(horizontal(label_span=3), override)
        self.assertEqual(layout.label_css, "col-md-3 text-end")
        self.assertEqual(layout.offset_css, "offset-md-3 mt-2")
        self.assertEqual(layout.error_css, "small")
        self.assertEqual(layout.hint_css, "muted")

    def test_vertical_layout_has_no_grid_classes(self):
        layout = resolve_layout(FormLayoutConfig(label_span=3))
        self.assertEqual((layout.label_css, layout.input_css, layout.offset_css), ("", "", ""))


class PlaceholderAndLabelTests(SimpleTestCase):
    def test_inline_form_moves_labels_to_placeholder(self):
        layout = resolve_layout(FormLayoutConfig(layout_type=LayoutType.INLINE))
        self.assertTrue(layout.auto_placeholder)
        self.assertIs(layout.show_labels, False)

    def test_inline_screen_reader_labels_are_kept(self):
        layout = resolve_layout(FormLayoutConfig(layout_type=LayoutType.INLINE, show_labels=SCREEN_READER))
        self.assertTrue(layout.auto_placeholder)
        self.assertEqual(layout.show_labels, SCREEN_READER)
        self.assertTrue(layout.screen_reader)

    def test_inline_with_visible_labels_has_no_placeholder(self):
        layout = resolve_layout(FormLayoutConfig(layout_type=LayoutType.INLINE, show_labels=True))
        self.assertFalse(layout.auto_placeholder)
        self.assertIs(layout.show_labels, True)

    def test_auto_placeholder_hides_labels(self):
        for layout_type in LayoutType.values:
            with self.subTest(layout_type=layout_type):
                config = FormLayoutConfig(layout_type=layout_type, show_labels=True)
                layout = resolve_layout(config, FieldLayoutOverride(auto_placeholder=True))
                self.assertIs(layout.show_labels, False)

    def test_auto_placeholder_keeps_screen_reader_labels(self):
        layout = resolve_layout(
            FormLayoutConfig(), FieldLayoutOverride(auto_placeholder=True, show_labels=SCREEN_READER)
        )
        self.assertEqual(layout.show_labels, SCREEN_READER)

    def test_enable_switches_take_priority(self):
        config = FormLayoutConfig(show_labels=True, show_errors=False)
        layout = resolve_layout(config, FieldLayoutOverride(enable_label=False, enable_error=True, show_labels=True))
        self.assertIs(layout.show_labels, False)
        self.assertTrue(layout.show_errors)
        self.assertTrue(layout.errors_forced)


class ToggleLayoutTests(SimpleTestCase):
    def test_enclosed_toggle_is_offset(self):
        layout = resolve_layout(horizontal(label_span=3), FieldLayoutOverride(enclosed_by_label=True), True)
        self.assertTrue(layout.enclosed_by_label)
        self.assertTrue(layout.is_offset)

    def test_non_toggle_is_never_offset(self):
        layout = resolve_layout(horizontal(label_span=3), FieldLayoutOverride(enclosed_by_label=True))
        self.assertFalse(layout.enclosed_by_label)
        self.assertFalse(layout.is_offset)

    def test_default_enclosure_depends_on_bootstrap_version(self):
        self.assertTrue(resolve_layout(FormLayoutConfig(bs_version=3), None, True).enclosed_by_label)
        self.assertFalse(resolve_layout(FormLayoutConfig(bs_version=4), None, True).enclosed_by_label)
        self.assertFalse(resolve_layout(FormLayoutConfig(bs_version=5), None, True).enclosed_by_label)

    def test_custom_toggles_are_not_enclosed(self):
        resolver = LayoutResolver(FormLayoutConfig(bs_version=3))
        self.assertFalse(resolver.resolve(None, True, custom=True).enclosed_by_label)


class SkipFormLayoutTests(SimpleTestCase):
    def test_skip_form_layout_clears_grid_classes(self):
        override = FieldLayoutOverride(skip_form_layout=True, enclosed_by_label=True)
        layout = resolve_layout(horizontal(label_span=3), override, True)
        self.assertTrue(layout.skip_form_layout)
        self.assertEqual((layout.label_css, layout.input_css, layout.offset_css), ("", "", ""))
        self.assertFalse(layout.is_offset)
