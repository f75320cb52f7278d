import pytest

from girdoc.config import FormatCfg
from girdoc.format.links import LinkFormatter
from girdoc.index.model import ConstantInfo, EnumInfo, FunctionInfo, MemberInfo, ObjectInfo
from girdoc.naming import bitfield_member_name, enum_member_name, to_camel


@pytest.mark.parametrize("name, camel", [
    ("fill", "Fill"),
    ("my_flag_one", "MyFlagOne"),
    ("SOME_UPPER", "SomeUpper"),
    ("_leading__double", "LeadingDouble"),
])
def test_to_camel(name, camel):
    assert to_camel(name) == camel


def test_member_names_not_starting_with_letter():
    assert enum_member_name("2d") == "_2d"
    assert bitfield_member_name("2d") == "_2D"
    assert bitfield_member_name("prelight") == "PRELIGHT"


class TestLinkFormatter:

    def test_type_link(self):
        assert LinkFormatter().type_link("gio::File") == "[`gio::File`][crate::gio::File]"

    def test_enum_and_flags_members(self):
        owner = EnumInfo("StateFlags", "GtkStateFlags")
        member = MemberInfo("focus_visible", "GTK_STATE_FLAG_FOCUS_VISIBLE")
        camel = LinkFormatter()
        upper = LinkFormatter(flags_member_style="upper")
        assert camel.enum_member_link(owner, member) == \
            "[`StateFlags::FocusVisible`][crate::StateFlags::FocusVisible]"
        assert camel.flags_member_link(owner, member) == \
            "[`StateFlags::FocusVisible`][crate::StateFlags::FocusVisible]"
        assert upper.flags_member_link(owner, member) == \
            "[`StateFlags::FOCUS_VISIBLE`][crate::StateFlags::FOCUS_VISIBLE]"

    def test_constant_with_crate(self):
        const = ConstantInfo("PRIORITY_DEFAULT", "G_PRIORITY_DEFAULT", crate="glib")
        assert LinkFormatter().constant_link(const) == \
            "[`glib::PRIORITY_DEFAULT`][crate::glib::PRIORITY_DEFAULT]"

    def test_literals(self):
        links = LinkFormatter(prefix="gtk")
        assert links.literal_link("NULL") == "[`None`]"
        assert links.literal_link("MAYBE") is None

    def test_global_function(self):
        assert LinkFormatter().function_link(FunctionInfo("init", "gtk_init", "function")) == \
            "[`init()`][crate::init()]"

    def test_object_parent(self):
        links = LinkFormatter()
        widget = ObjectInfo("Widget", "GtkWidget")
        custom = ObjectInfo("Native", "GtkNative", trait_name="NativeExtManual")
        final = ObjectInfo("Label", "GtkLabel", final=True)
        method = FunctionInfo("show", "x")
        ctor = FunctionInfo("new", "y", "constructor")
        assert links.object_parent(widget, method) == ("prelude::WidgetExt", "Widget")
        assert links.object_parent(widget, ctor) == ("Widget", "Widget")
        assert links.object_parent(custom, method) == ("prelude::NativeExtManual", "Native")
        assert links.object_parent(final, method) == ("Label", "Label")

    def test_external_object_trait_path(self):
        links = LinkFormatter()
        file = ObjectInfo("File", "GFile", crate="gio")
        fn = FunctionInfo("read", "g_file_read")
        parent, visible = links.object_parent(file, fn)
        assert links.function_link(fn, parent, visible) == \
            "[`File::read()`][crate::gio::prelude::FileExt::read()]"

    def test_from_config(self):
        links = LinkFormatter.from_config(FormatCfg(link_prefix="gtk4", trait_module="traits"))
        widget = ObjectInfo("Widget", "GtkWidget")
        fn = FunctionInfo("show", "gtk_widget_show")
        assert links.function_link(fn, *links.object_parent(widget, fn)) == \
            "[`Widget::show()`][gtk4::traits::WidgetExt::show()]"
