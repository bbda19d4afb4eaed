"""
Tests for template verification.

The fixture tree starts uninitialized, so every check has something to report.
"""

from pathlib import Path

from stencil.core.config import TemplateConfig
from stencil.core.init_impl.project import initialize_template
from stencil.core.init_impl.verify import (
    EXCERPT_LENGTH,
    check_required_files,
    find_placeholders,
    scan_for_placeholders,
    verify_template,
)
from stencil.core.values import PlaceholderValues

# =============================================================================
# find_placeholders
# =============================================================================


class TestFindPlaceholders:
    def test_line_numbers_are_one_based(self) -> None:
        content = "first\nsecond __PROJECT_NAME__\n"
        assert list(find_placeholders(content)) == [(2, "__PROJECT_NAME__", "second __PROJECT_NAME__")]

    def test_unknown_bracketed_token_is_flagged(self) -> None:
        found = list(find_placeholders("value = __NEW_TOKEN__"))
        assert [token for _, token, _ in found] == ["__NEW_TOKEN__"]

    def test_bare_tokens_respect_exceptions(self) -> None:
        assert list(find_placeholders("raise UNAUTHORIZED")) == []
        assert [token for _, token, _ in find_placeholders("by AUTHOR")] == ["AUTHOR"]

    def test_only_newlines_split_lines(self) -> None:
        content = "a\x0cb\u2028c\nsecond __PROJECT_NAME__\r\n"
        assert [line for line, _, _ in find_placeholders(content)] == [2]

    def test_one_entry_per_distinct_token_per_line(self) -> None:
        found = list(find_placeholders("__AUTHOR__ and __AUTHOR__ and AUTHOR"))
        assert sorted(token for _, token, _ in found) == ["AUTHOR", "__AUTHOR__"]

    def test_excerpt_is_trimmed_and_truncated(self) -> None:
        line = "    " + "x" * 100 + " __PROJECT_NAME__"
        _, _, excerpt = next(find_placeholders(line))
        assert len(excerpt) == EXCERPT_LENGTH
        assert excerpt == ("x" * 100)[:EXCERPT_LENGTH]


# =============================================================================
# Individual checks
# =============================================================================


class TestScanForPlaceholders:
    def test_fresh_template(self, config: TemplateConfig) -> None:
        issues, unreadable = scan_for_placeholders(config)
        files = {issue.file for issue in issues}

        assert unreadable == []
        assert files == {"package.json", "README.md", "src/index.ts"}
        assert ("package.json", 2, "PROJECT_NAME") in {
            (i.file, i.line_number, i.matched_token) for i in issues
        }

    def test_skips_template_metadata_and_dependencies(self, config: TemplateConfig) -> None:
        issues, _ = scan_for_placeholders(config)
        files = {issue.file for issue in issues}
        assert not any(f.startswith(".template/") or "node_modules" in f for f in files)

    def test_invalid_utf8_still_scanned(self, config: TemplateConfig) -> None:
        latin1 = "Caf\u00e9 guide for __PROJECT_NAME__\n".encode("latin-1")
        (config.root / "docs.md").write_bytes(latin1)

        issues, unreadable = scan_for_placeholders(config)

        assert unreadable == []
        assert ("docs.md", 1, "__PROJECT_NAME__") in {
            (i.file, i.line_number, i.matched_token) for i in issues
        }

    def test_unreadable_file_reported(self, config: TemplateConfig, monkeypatch) -> None:
        original = Path.read_bytes

        def read_bytes(self):
            if self.name == "tsconfig.json":
                raise PermissionError("denied")
            return original(self)

        monkeypatch.setattr(Path, "read_bytes", read_bytes)

        _, unreadable = scan_for_placeholders(config)

        assert unreadable == ["tsconfig.json"]


def test_check_required_files(config: TemplateConfig) -> None:
    assert check_required_files(config) == []

    (config.root / "tsconfig.json").unlink()
    (config.root / ".gitignore").unlink()

    assert check_required_files(config) == [".gitignore", "tsconfig.json"]


# =============================================================================
# verify_template
# =============================================================================


class TestVerifyTemplate:
    def test_fresh_template_fails(self, config: TemplateConfig, reporter) -> None:
        report = verify_template(config, reporter)

        assert not report.passed
        assert not report.marker_removed
        assert report.missing_files == []
        assert "Template is not initialized: found .template/UNINITIALIZED" in reporter.texts(
            "error"
        )
        assert "Found placeholders in 3 file(s)" in reporter.texts("error")

    def test_clean_tree_passes(self, config: TemplateConfig, reporter) -> None:
        config.marker_path.unlink()
        (config.root / "package.json").write_text('{"name": "acme-app"}\n')
        (config.root / "README.md").write_text("# acme-app\n")
        (config.root / "src" / "index.ts").write_text('export const name = "acme-app";\n')

        report = verify_template(config, reporter)

        assert report.passed
        assert reporter.texts("error") == []
        assert "No placeholders found" in reporter.texts("success")

    def test_all_checks_run_after_failure(self, config: TemplateConfig, reporter) -> None:
        (config.root / "README.md").unlink()

        report = verify_template(config, reporter)

        assert report.missing_files == ["README.md"]
        assert "Missing: README.md" in reporter.texts("error")
        assert report.issues

    def test_json_shape(self, config: TemplateConfig) -> None:
        data = verify_template(config).model_dump(by_alias=True)

        assert data["passed"] is False
        assert data["markerRemoved"] is False
        assert data["missingFiles"] == []
        assert data["unreadableFiles"] == []
        assert set(data["issues"][0]) == {"file", "lineNumber", "matchedToken", "lineExcerpt"}

    def test_issues_grouped_by_file(self, config: TemplateConfig) -> None:
        grouped = verify_template(config).issues_by_file()
        assert [i.line_number for i in grouped["src/index.ts"]] == [1]

    def test_root_is_reported_relative(self, config: TemplateConfig) -> None:
        for issue in verify_template(config).issues:
            assert not Path(issue.file).is_absolute()

    def test_invalid_utf8_leftover_fails_after_init(
        self, config: TemplateConfig, values: PlaceholderValues, reporter
    ) -> None:
        (config.root / "docs.md").write_bytes(
            "Café guide for __PROJECT_NAME__\n".encode("latin-1")
        )
        initialize_template(config, values, reporter)

        report = verify_template(config)

        assert not report.passed
        assert {issue.file for issue in report.issues} == {"docs.md"}

    def test_unreadable_file_fails(self, config: TemplateConfig, reporter, monkeypatch) -> None:
        config.marker_path.unlink()
        original = Path.read_bytes

        def read_bytes(self):
            if self.name == "tsconfig.json":
                raise PermissionError("denied")
            return original(self)

        monkeypatch.setattr(Path, "read_bytes", read_bytes)

        report = verify_template(config, reporter)

        assert report.unreadable_files == ["tsconfig.json"]
        assert not report.passed
        assert "Could not read: tsconfig.json" in reporter.texts("error")
