"""Tests for source path to report path naming."""

from pathlib import Path

from coverage_quest.coverage.naming import JacocoHtmlNaming


class TestJacocoHtmlNaming:
    """Test the JaCoCo HTML layout."""

    def test_standard_maven_layout(self, tmp_path):
        location = JacocoHtmlNaming().locate(tmp_path, "src/main/java/com/example/shop/Cart.java")

        assert location.package_name == "com.example.shop"
        assert location.class_name == "Cart"
        assert location.extension == "java"
        assert location.report_path == tmp_path / "com.example.shop" / "Cart.java.html"

    def test_nested_package_directories(self, tmp_path):
        naming = JacocoHtmlNaming(package_separator="/")

        location = naming.locate(tmp_path, "src/main/java/com/example/Cart.java")

        assert location.package_name == "com.example"
        assert location.report_path == tmp_path / "com" / "example" / "Cart.java.html"

    def test_only_leading_source_roots_are_stripped(self):
        location = JacocoHtmlNaming().locate("/r", "src/main/java/org/main/java/Util.java")

        assert location.package_name == "org.main.java"

    def test_custom_source_roots_and_suffix(self):
        naming = JacocoHtmlNaming(source_root_segments=("src", "main", "kotlin"), report_suffix=".htm")

        location = naming.locate("/r", "src/main/kotlin/io/app/Main.kt")

        assert location.package_name == "io.app"
        assert location.class_name == "Main"
        assert location.extension == "kt"
        assert location.report_path == Path("/r/io.app/Main.kt.htm")

    def test_default_package(self):
        location = JacocoHtmlNaming().locate("/r", "src/main/java/App.java")

        assert location.package_name == ""
        assert location.report_path == Path("/r/default/App.java.html")

    def test_class_name_stops_at_first_dot(self):
        location = JacocoHtmlNaming().locate("/r", "src/main/java/p/Foo.generated.java")

        assert location.class_name == "Foo"
        assert location.extension == "generated.java"
        assert location.report_path == Path("/r/p/Foo.generated.java.html")

    def test_unnamed_paths(self):
        naming = JacocoHtmlNaming()
        assert naming.locate("/r", "") is None
        assert naming.locate("/r", "src/main/java/p/.hidden") is None
        assert naming.locate("/r", "src/main/java/p/") is None
