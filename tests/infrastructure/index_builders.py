"""
Sample symbol indexes used across the tests.

The main sample mimics a small slice of GTK:
  objects: Buildable (interface), Widget → Buildable, Button → Widget,
           Label (final) → Widget, gio::File
  records: Rectangle, TextIter, glib::List (C type GList, ignore-listed)
  enums:   Align (BASELINE ignored)
  flags:   StateFlags
  globals: gtk_init(), GTK_MAJOR_VERSION, glib::G_PRIORITY_DEFAULT
"""

from __future__ import annotations

import textwrap

from girdoc.index.model import (
    ConstantInfo,
    EnumInfo,
    FunctionInfo,
    MemberInfo,
    ObjectInfo,
    RecordInfo,
    SymbolIndex,
)


def make_sample_index() -> SymbolIndex:
    return SymbolIndex(
        objects=(
            ObjectInfo(
                name="Buildable",
                c_type="GtkBuildable",
                full_name="Gtk.Buildable",
                functions=(
                    FunctionInfo("buildable_id", "gtk_buildable_get_buildable_id"),
                ),
            ),
            ObjectInfo(
                name="Widget",
                c_type="GtkWidget",
                full_name="Gtk.Widget",
                parents=("Buildable",),
                functions=(
                    FunctionInfo("show", "gtk_widget_show"),
                    FunctionInfo("hide", "gtk_widget_hide"),
                ),
            ),
            ObjectInfo(
                name="Button",
                c_type="GtkButton",
                full_name="Gtk.Button",
                parents=("Widget",),
                functions=(
                    FunctionInfo("new", "gtk_button_new", kind="constructor"),
                    FunctionInfo("set_label", "gtk_button_set_label"),
                ),
            ),
            ObjectInfo(
                name="Label",
                c_type="GtkLabel",
                full_name="Gtk.Label",
                final=True,
                parents=("Widget",),
                functions=(
                    FunctionInfo("set_text", "gtk_label_set_text"),
                ),
            ),
            ObjectInfo(
                name="File",
                c_type="GFile",
                full_name="Gio.File",
                crate="gio",
                functions=(
                    FunctionInfo("read", "g_file_read"),
                ),
            ),
        ),
        records=(
            RecordInfo(
                name="Rectangle",
                c_type="GdkRectangle",
                functions=(
                    FunctionInfo("intersect", "gdk_rectangle_intersect"),
                ),
            ),
            RecordInfo(
                name="TextIter",
                c_type="GtkTextIter",
                functions=(
                    FunctionInfo("forward_char", "gtk_text_iter_forward_char"),
                ),
            ),
            RecordInfo(name="List", c_type="GList", crate="glib"),
        ),
        enumerations=(
            EnumInfo(
                name="Align",
                c_type="GtkAlign",
                members=(
                    MemberInfo("fill", "GTK_ALIGN_FILL"),
                    MemberInfo("start", "GTK_ALIGN_START"),
                    MemberInfo("baseline", "GTK_ALIGN_BASELINE", ignored=True),
                ),
            ),
        ),
        flags=(
            EnumInfo(
                name="StateFlags",
                c_type="GtkStateFlags",
                members=(
                    MemberInfo("normal", "GTK_STATE_FLAG_NORMAL"),
                    MemberInfo("prelight", "GTK_STATE_FLAG_PRELIGHT"),
                ),
            ),
        ),
        functions=(
            FunctionInfo("init", "gtk_init", kind="function"),
        ),
        constants=(
            ConstantInfo("MAJOR_VERSION", "GTK_MAJOR_VERSION"),
            ConstantInfo("PRIORITY_DEFAULT", "G_PRIORITY_DEFAULT", crate="glib"),
        ),
    )


def make_scenario_index() -> SymbolIndex:
    """Minimal index: a `Widget` record and `MyFlags` with MY_FLAG_ONE."""
    return SymbolIndex(
        records=(RecordInfo(name="Widget", c_type="Widget"),),
        flags=(
            EnumInfo(
                name="MyFlags",
                c_type="MyFlags",
                members=(MemberInfo("my_flag_one", "MY_FLAG_ONE"),),
            ),
        ),
    )


SAMPLE_INDEX_YAML = textwrap.dedent("""
    objects:
      - name: Widget
        c_type: GtkWidget
        full_name: Gtk.Widget
        functions:
          - {name: show, c_identifier: gtk_widget_show}
      - name: Button
        c_type: GtkButton
        parents: [Widget]
        functions:
          - {name: new, c_identifier: gtk_button_new, kind: constructor}
    records:
      - name: Rectangle
        c_type: GdkRectangle
        functions:
          - {name: intersect, c_identifier: gdk_rectangle_intersect}
    enumerations:
      - name: Align
        c_type: GtkAlign
        members:
          - {name: fill, c_identifier: GTK_ALIGN_FILL}
          - {name: baseline, c_identifier: GTK_ALIGN_BASELINE, ignored: true}
    flags:
      - name: StateFlags
        c_type: GtkStateFlags
        members:
          - {name: normal, c_identifier: GTK_STATE_FLAG_NORMAL}
    functions:
      - {name: init, c_identifier: gtk_init}
    constants:
      - {name: MAJOR_VERSION, c_identifier: GTK_MAJOR_VERSION}
""").lstrip()
