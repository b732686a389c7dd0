from html2react.core.generators import RouteTable
from html2react.core.models import RouteEntry


class TestRouteEntries:

    def test_root_document(self):
        entry = RouteTable().add_entry("", "about")
        assert entry == RouteEntry(route_path="about", module_path="./About")

    def test_nested_document(self):
        entry = RouteTable().add_entry("about", "team")
        assert entry == RouteEntry(route_path="about/team", module_path="./about/Team")

    def test_nested_index(self):
        entry = RouteTable().add_entry("blog", "index")
        assert entry == RouteEntry(route_path="blog", module_path="./blog/Index")

    def test_windows_separators_normalised(self):
        entry = RouteTable().add_entry("docs\\guide", "intro")
        assert entry.route_path == "docs/guide/intro"
        assert entry.module_path == "./docs/guide/Intro"

    def test_identifier_is_prefixed_and_sanitized(self):
        entry = RouteEntry(route_path="about/team", module_path="./about/Team")
        assert RouteTable.identifier_for(entry) == "Page_about_Team"


class TestFlush:

    def test_entry_module_lists_every_route_then_fallback(self):
        table = RouteTable(entry_component="App")
        table.add_entry("", "contact")
        table.add_entry("about", "team")
        module = table.flush()

        assert 'import App from "./App";' in module
        assert 'import Page_Contact from "./Contact";' in module
        assert 'import Page_about_Team from "./about/Team";' in module
        assert '<Route path="contact" element={<Page_Contact />} />' in module
        assert '<Route path="about/team" element={<Page_about_Team />} />' in module

        routes = [line.strip() for line in module.splitlines() if line.strip().startswith("<Route ")]
        assert routes[-1] == '<Route path="*" element={<App />} />'
        assert len(routes) == 3

    def test_empty_table_has_only_fallback(self):
        module = RouteTable().flush()
        routes = [line for line in module.splitlines() if "<Route " in line]
        assert routes == ['      <Route path="*" element={<App />} />']
        assert 'ReactDOM.createRoot(document.getElementById("root"))' in module

    def test_reset_clears_entries(self):
        table = RouteTable()
        table.add_entry("", "a")
        table.flush()
        table.reset()
        assert len(table) == 0
        assert "Page_A" not in table.flush()
