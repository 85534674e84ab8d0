"""Tests for the sync run (classification through merge)."""

from tailwind_sync import END_MARKER, START_MARKER
from tailwind_sync.config import SyncOptions
from tailwind_sync.sync import SyncResult, sync_all, update_source_directives
from tailwind_sync.tree import FsTree, MemoryTree

VITE_CONFIG = (
    "import tailwindcss from '@tailwindcss/vite';\n"
    "export default { plugins: [tailwindcss()] };\n"
)


class TestScenarios:
    def test_single_dependency(self, build_graph):
        graph = build_graph({"app": "apps/app", "lib": "libs/lib"}, {"app": ["lib"]})
        tree = MemoryTree({"apps/app/src/styles.css": "@import 'tailwindcss';"})

        result = sync_all(tree, graph)

        css = tree.read("apps/app/src/styles.css")
        assert result.updated == ["app"]
        assert css.startswith("@import 'tailwindcss';\n")
        assert css.index(START_MARKER) > css.index("@import")
        assert css.count("@source") == 1
        assert '@source "../../../libs/lib";' in css

    def test_transitive_chain(self, build_graph):
        graph = build_graph(
            {"app": "apps/app", "lib-a": "libs/lib-a", "lib-b": "libs/lib-b"},
            {"app": ["lib-a"], "lib-a": ["lib-b"]},
        )
        tree = MemoryTree({"apps/app/src/styles.css": "@import 'tailwindcss';"})

        sync_all(tree, graph)

        css = tree.read("apps/app/src/styles.css")
        assert '@source "../../../libs/lib-a";' in css
        assert '@source "../../../libs/lib-b";' in css

    def test_no_dependencies_leaves_file_alone(self, build_graph):
        graph = build_graph({"app": "apps/app"}, {})
        tree = MemoryTree({"apps/app/src/styles.css": "@import 'tailwindcss';"})

        result = sync_all(tree, graph)

        assert result.updated == []
        assert result.unchanged == ["app"]
        assert result.out_of_sync_message is None
        assert tree.read("apps/app/src/styles.css") == "@import 'tailwindcss';"
        assert tree.list_changes() == []

    def test_replaces_stale_block(self, build_graph):
        graph = build_graph({"app": "apps/app", "new-lib": "libs/new-lib"}, {"app": ["new-lib"]})
        tree = MemoryTree({
            "apps/app/src/styles.css": (
                "@import 'tailwindcss';\n\n"
                f"{START_MARKER}\n"
                '@source "../../../libs/old-lib";\n'
                f"{END_MARKER}\n"
            ),
        })

        sync_all(tree, graph)

        css = tree.read("apps/app/src/styles.css")
        assert "new-lib" in css
        assert "old-lib" not in css
        assert css.count(START_MARKER) == 1

    def test_vite_plugin_with_empty_stylesheet(self, build_graph):
        graph = build_graph({"app": "apps/app", "lib": "libs/lib"}, {"app": ["lib"]})
        tree = MemoryTree({
            "apps/app/vite.config.ts": VITE_CONFIG,
            "apps/app/src/styles.css": "",
        })

        result = sync_all(tree, graph)

        css = tree.read("apps/app/src/styles.css")
        assert result.updated == ["app"]
        assert css.startswith(START_MARKER)
        assert '@source "../../../libs/lib";' in css


class TestSyncAll:
    def test_fixture_workspace(self, graph):
        tree = MemoryTree({
            "apps/shop/src/styles.css": "@import 'tailwindcss';\n",
            "apps/admin/.storybook/styles.css": "@import \"tailwindcss\";\n",
            "libs/ui/src/styles.css": "body {}\n",
        })

        result = sync_all(tree, graph)

        assert result.updated == ["shop", "admin"]
        assert result.files == {
            "shop": "apps/shop/src/styles.css",
            "admin": "apps/admin/.storybook/styles.css",
        }
        assert result.out_of_sync_message == (
            "Tailwind @source directives updated for: shop, admin"
        )
        admin = tree.read("apps/admin/.storybook/styles.css")
        assert admin == (
            '@import "tailwindcss";\n\n'
            f"{START_MARKER}\n"
            '@source "../../../libs/shared/utils";\n'
            '@source "../../../libs/ui";\n'
            f"{END_MARKER}\n"
        )
        assert tree.read("libs/ui/src/styles.css") == "body {}\n"

    def test_second_run_reports_nothing(self, graph):
        tree = MemoryTree({"apps/shop/src/styles.css": "@import 'tailwindcss';\n.a {}\n"})
        sync_all(tree, graph)
        after_first = tree.read("apps/shop/src/styles.css")

        second = sync_all(tree, graph)

        assert second.updated == []
        assert second.out_of_sync_message is None
        assert tree.read("apps/shop/src/styles.css") == after_first

    def test_additional_style_paths(self, graph):
        tree = MemoryTree({"apps/shop/src/app/global.css": "@import 'tailwindcss';"})
        assert sync_all(tree, graph).updated == []

        result = sync_all(tree, graph, SyncOptions(additional_style_paths=["src/app/global.css"]))
        assert result.updated == ["shop"]
        assert "@source" in tree.read("apps/shop/src/app/global.css")

    def test_vite_project_without_stylesheet(self, graph):
        tree = MemoryTree({"apps/admin/vite.config.mts": VITE_CONFIG})
        result = sync_all(tree, graph)
        assert result.without_stylesheet == ["admin"]
        assert tree.list_changes() == []

    def test_each_file_written_once(self, graph):
        tree = MemoryTree({
            "apps/shop/src/styles.css": "@import 'tailwindcss';",
            "apps/admin/src/styles.css": "@import 'tailwindcss';",
        })
        sync_all(tree, graph)
        paths = [c.path for c in tree.list_changes()]
        assert sorted(paths) == ["apps/admin/src/styles.css", "apps/shop/src/styles.css"]

    def test_update_source_directives_returns_flag(self, graph):
        tree = MemoryTree({"apps/admin/src/styles.css": "@import 'tailwindcss';"})
        assert update_source_directives(tree, "admin", "apps/admin/src/styles.css", graph)
        assert not update_source_directives(tree, "admin", "apps/admin/src/styles.css", graph)

    def test_missing_file_treated_as_empty(self, graph):
        tree = MemoryTree()
        assert update_source_directives(tree, "admin", "apps/admin/src/styles.css", graph)
        assert tree.read("apps/admin/src/styles.css").startswith(START_MARKER)


class TestSyncResult:
    def test_summary(self):
        result = SyncResult(updated=["shop"], unchanged=["admin"], files={"shop": "apps/shop/src/styles.css"})
        text = result.summary()
        assert "Updated:   1" in text
        assert "shop: apps/shop/src/styles.css" in text


class TestFsTreeIntegration:
    def test_sync_then_flush(self, tmp_path, graph):
        css = tmp_path / "apps" / "shop" / "src" / "styles.css"
        css.parent.mkdir(parents=True)
        css.write_text("@import 'tailwindcss';\n\n.btn { color: red; }\n")

        tree = FsTree(tmp_path)
        result = sync_all(tree, graph)
        assert result.updated == ["shop"]
        # nothing on disk until flush
        assert START_MARKER not in css.read_text()

        assert tree.flush() == ["apps/shop/src/styles.css"]
        content = css.read_text()
        assert '@source "../../../libs/feature-cart";' in content
        assert content.endswith(".btn { color: red; }\n")

        assert sync_all(FsTree(tmp_path), graph).updated == []


class TestLogging:
    def test_updates_logged(self, graph, caplog):
        tree = MemoryTree({"apps/shop/src/styles.css": "@import 'tailwindcss';"})
        with caplog.at_level("DEBUG", logger="tailwind_sync"):
            sync_all(tree, graph)
            sync_all(tree, graph)
        messages = [r.getMessage() for r in caplog.records]
        assert "updated apps/shop/src/styles.css" in messages
        assert "shop already in sync" in messages


class TestUndecodableFiles:
    def test_latin1_stylesheet_does_not_abort_run(self, tmp_path, graph):
        legacy = tmp_path / "libs" / "ui" / "src" / "styles.css"
        legacy.parent.mkdir(parents=True)
        legacy.write_bytes(b"/* caf\xe9 */ body {}\n")
        shop = tmp_path / "apps" / "shop" / "src" / "styles.css"
        shop.parent.mkdir(parents=True)
        shop.write_text("@import 'tailwindcss';\n")

        tree = FsTree(tmp_path)
        result = sync_all(tree, graph)
        tree.flush()

        assert result.updated == ["shop"]
        assert START_MARKER in shop.read_text()
        assert legacy.read_bytes() == b"/* caf\xe9 */ body {}\n"

    def test_latin1_target_bytes_preserved(self, tmp_path, graph):
        shop = tmp_path / "apps" / "shop" / "src" / "styles.css"
        shop.parent.mkdir(parents=True)
        shop.write_bytes(b"@import 'tailwindcss';\n/* caf\xe9 */\n")

        tree = FsTree(tmp_path)
        assert sync_all(tree, graph).updated == ["shop"]
        tree.flush()

        data = shop.read_bytes()
        assert data.startswith(b"@import 'tailwindcss';\n")
        assert data.endswith(b"\n/* caf\xe9 */\n")
        assert START_MARKER.encode() in data
