"""Tests für Sitzung, Textdarstellung, interaktives Menü und main.py-CLI."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from config.defaults import SAMPLE_COURSE_LINES
from config.schema import DisplayConfig, PlannerConfig
from models.course import Course
from planner.render import (
    format_course_detail,
    format_course_line,
    format_course_list,
    format_not_found,
)
from planner.session import NoDataLoadedError, PlannerSession, normalize_course_query


# ─── Fixtures ─────────────────────────────────────────────────────────────────

@pytest.fixture
def course_file(tmp_path: Path) -> Path:
    p = tmp_path / "courses.csv"
    p.write_text("\n".join(SAMPLE_COURSE_LINES) + "\n", encoding="utf-8")
    return p


@pytest.fixture
def broken_file(tmp_path: Path) -> Path:
    p = tmp_path / "broken.csv"
    p.write_text("CSCI100,Intro CS\nCSCI999\n", encoding="utf-8")
    return p


# ─── Tests: Eingabe-Normalisierung ────────────────────────────────────────────

class TestNormalizeCourseQuery:
    def test_uppercases(self):
        assert normalize_course_query("csci200") == "CSCI200"

    def test_cuts_at_comma(self):
        assert normalize_course_query("csci200, Data Structures") == "CSCI200"

    def test_cuts_at_space(self):
        assert normalize_course_query("csci200 please") == "CSCI200"

    def test_strips_leading_whitespace(self):
        assert normalize_course_query("   csci200\n") == "CSCI200"

    def test_uppercase_disabled(self):
        assert normalize_course_query("csci200", uppercase=False) == "csci200"

    def test_empty_input(self):
        assert normalize_course_query("   ") == ""


# ─── Tests: Textdarstellung ───────────────────────────────────────────────────

class TestRender:
    def test_course_line(self):
        c = Course(identifier="CSCI100", title="Intro CS")
        assert format_course_line(c) == "CSCI100, Intro CS"

    def test_detail_without_prerequisites(self):
        c = Course(identifier="CSCI100", title="Intro CS")
        assert format_course_detail(c) == ["CSCI100,Intro CS", "Prerequisites: None"]

    def test_detail_with_prerequisites_in_order(self):
        c = Course(identifier="CSCI300", title="Algorithms",
                   prerequisites=["CSCI200", "MATH201"])
        assert format_course_detail(c)[1] == "Prerequisites: CSCI200, MATH201"

    def test_not_found(self):
        assert format_not_found("CSCI999") == "Course CSCI999 not found."

    def test_course_list(self):
        courses = [Course(identifier="A", title="Alpha"), Course(identifier="B", title="Beta")]
        assert format_course_list(courses) == ["A, Alpha", "B, Beta"]


# ─── Tests: Sitzung ───────────────────────────────────────────────────────────

class TestPlannerSession:
    def test_initially_not_loaded(self):
        session = PlannerSession()
        assert not session.data_loaded
        with pytest.raises(NoDataLoadedError):
            session.course_list()
        with pytest.raises(NoDataLoadedError):
            session.lookup("CSCI100")

    def test_load_and_list(self, course_file: Path):
        session = PlannerSession()
        result = session.load(course_file)
        assert result.ok
        assert session.data_loaded
        ids = [c.identifier for c in session.course_list()]
        assert ids == sorted(ids)
        assert ids[0] == "CSCI100"
        assert ids[-1] == "MATH201"

    def test_lookup_case_insensitive_for_user(self, course_file: Path):
        session = PlannerSession()
        session.load(course_file)
        identifier, course = session.lookup("csci400, anything")
        assert identifier == "CSCI400"
        assert course.prerequisites == ["CSCI301", "CSCI350"]

    def test_lookup_exact_when_uppercase_disabled(self, course_file: Path):
        session = PlannerSession(PlannerConfig(display=DisplayConfig(uppercase_queries=False)))
        session.load(course_file)
        assert session.lookup("csci400")[1] is None
        assert session.lookup("CSCI400")[1] is not None

    def test_lookup_not_found(self, course_file: Path):
        session = PlannerSession()
        session.load(course_file)
        assert session.lookup("CSCI999") == ("CSCI999", None)

    def test_failed_reload_keeps_previous_catalog(self, course_file: Path, broken_file: Path):
        session = PlannerSession()
        session.load(course_file)
        result = session.load(broken_file)
        assert not result.ok
        assert session.data_loaded
        assert session.source == course_file
        assert len(session.catalog) == len(SAMPLE_COURSE_LINES)

    def test_reload_replaces_catalog(self, course_file: Path, tmp_path: Path):
        other = tmp_path / "other.csv"
        other.write_text("ART100,Drawing\n", encoding="utf-8")
        session = PlannerSession()
        session.load(course_file)
        session.load(other)
        assert [c.identifier for c in session.course_list()] == ["ART100"]

    def test_failed_first_load_stays_unloaded(self, broken_file: Path):
        session = PlannerSession()
        session.load(broken_file)
        assert not session.data_loaded
        assert session.catalog.is_empty


# ─── Tests: interaktives Menü ─────────────────────────────────────────────────

class TestMenu:
    def _run(self, stdin: str):
        from main import cli
        runner = CliRunner()
        return runner.invoke(cli, ["shell"], input=stdin)

    def test_exit(self):
        result = self._run("9\n")
        assert result.exit_code == 0
        assert "Thank you for using the course planner!" in result.output

    def test_list_without_data(self):
        result = self._run("2\n9\n")
        assert "No data loaded" in result.output

    def test_invalid_input(self):
        result = self._run("abc\n7\n9\n")
        assert "Invalid input. Please enter a number." in result.output
        assert "7 is not a valid option." in result.output

    def test_load_list_show(self, course_file: Path):
        stdin = f"1\n{course_file}\n2\n3\ncsci300\n3\nnope\n9\n"
        result = self._run(stdin)
        assert result.exit_code == 0
        out = result.output
        assert "Successfully loaded 8 courses." in out
        assert "Here is a sample schedule:" in out
        assert out.index("CSCI100, Introduction to Computer Science") < out.index(
            "MATH201, Discrete Mathematics"
        )
        assert "CSCI300,Introduction to Algorithms" in out
        assert "Prerequisites: CSCI200, MATH201" in out
        assert "Course NOPE not found." in out

    def test_load_failure_reported(self, broken_file: Path):
        result = self._run(f"1\n{broken_file}\n2\n9\n")
        assert "Line 2 has insufficient data" in result.output
        assert "No data loaded" in result.output

    def test_end_of_input_exits(self):
        result = self._run("")
        assert result.exit_code == 0


# ─── Tests: main.py CLI ───────────────────────────────────────────────────────

class TestCli:
    def test_help(self):
        """main.py --help gibt Usage aus."""
        from main import cli
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "Usage" in result.output

    def test_list(self, course_file: Path):
        from main import cli
        result = CliRunner().invoke(cli, ["list", str(course_file)])
        assert result.exit_code == 0
        lines = [l for l in result.output.splitlines() if l.strip()]
        assert lines[0] == "CSCI100, Introduction to Computer Science"
        assert lines[-1] == "MATH201, Discrete Mathematics"
        assert len(lines) == len(SAMPLE_COURSE_LINES)

    def test_list_table(self, course_file: Path):
        from main import cli
        result = CliRunner().invoke(cli, ["list", "--table", str(course_file)])
        assert result.exit_code == 0
        assert "CSCI400" in result.output

    def test_list_broken_file_exits_1(self, broken_file: Path):
        from main import cli
        result = CliRunner().invoke(cli, ["list", str(broken_file)])
        assert result.exit_code == 1
        assert "insufficient data" in result.output

    def test_show(self, course_file: Path):
        from main import cli
        result = CliRunner().invoke(cli, ["show", str(course_file), "csci101"])
        assert result.exit_code == 0
        assert "CSCI101,Introduction to Programming in C++" in result.output
        assert "Prerequisites: CSCI100" in result.output

    def test_show_not_found(self, course_file: Path):
        from main import cli
        result = CliRunner().invoke(cli, ["show", str(course_file), "CSCI999"])
        assert result.exit_code == 1
        assert "Course CSCI999 not found." in result.output

    def test_validate_ok(self, course_file: Path):
        from main import cli
        result = CliRunner().invoke(cli, ["validate", str(course_file)])
        assert result.exit_code == 0
        assert "Courses: 8" in result.output

    def test_validate_missing_file(self, tmp_path: Path):
        from main import cli
        result = CliRunner().invoke(cli, ["validate", str(tmp_path / "none.csv")])
        assert result.exit_code == 1
        assert "Could not open file" in result.output

    def test_validate_bracket_identifier_exits_1(self, tmp_path: Path):
        """Eckige Klammern in der Fehlermeldung führen zu Exit 1, nicht zum Absturz."""
        from main import cli
        p = tmp_path / "brackets.csv"
        p.write_text("A[/b],Title,MISSING\n", encoding="utf-8")
        result = CliRunner().invoke(cli, ["validate", str(p)])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Prerequisite MISSING for course A[/b] does not exist" in result.output

    def test_config_top_level_list_exits_1(self, course_file: Path):
        from main import cli
        runner = CliRunner()
        with runner.isolated_filesystem():
            Path("config").mkdir()
            Path("config/planner_config.yaml").write_text("- a\n- b\n", encoding="utf-8")
            result = runner.invoke(cli, ["list", str(course_file)])
            assert result.exit_code == 1
            assert "Invalid configuration file" in result.output

    def test_export_both(self, course_file: Path, tmp_path: Path):
        from main import cli
        out_dir = tmp_path / "out"
        result = CliRunner().invoke(
            cli, ["export", str(course_file), "--output-dir", str(out_dir)]
        )
        assert result.exit_code == 0, result.output
        assert (out_dir / "courses.xlsx").exists()
        assert (out_dir / "courses.pdf").exists()

    def test_template_roundtrip(self):
        """Erzeugte Beispieldatei lässt sich fehlerfrei laden."""
        from main import cli
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["template", "-o", "sample.csv"])
            assert result.exit_code == 0
            check = runner.invoke(cli, ["validate", "sample.csv"])
            assert check.exit_code == 0

    def test_config_init_and_show(self):
        from main import cli
        runner = CliRunner()
        with runner.isolated_filesystem():
            result = runner.invoke(cli, ["config", "init"])
            assert result.exit_code == 0
            assert Path("config/planner_config.yaml").exists()
            again = runner.invoke(cli, ["config", "init"])
            assert "already exists" in again.output
            shown = runner.invoke(cli, ["config", "show"])
            assert shown.exit_code == 0
            assert "delimiter" in shown.output
