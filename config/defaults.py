from config.schema import (
    DisplayConfig,
    DuplicatePolicy,
    ExportConfig,
    PlannerConfig,
    SourceConfig,
)


# Beispieldatei des ABCU-Informatik-Fachbereichs
SAMPLE_COURSE_LINES = [
    "MATH201,Discrete Mathematics",
    "CSCI300,Introduction to Algorithms,CSCI200,MATH201",
    "CSCI350,Operating Systems,CSCI300",
    "CSCI101,Introduction to Programming in C++,CSCI100",
    "CSCI100,Introduction to Computer Science",
    "CSCI301,Advanced Programming in C++,CSCI101",
    "CSCI400,Large Software Development,CSCI301,CSCI350",
    "CSCI200,Data Structures,CSCI101",
]


def default_source() -> SourceConfig:
    """Standard: Komma-getrennt, UTF-8, doppelte Kursnummern abweisen."""
    return SourceConfig(
        delimiter=",",
        encoding="utf-8",
        default_file=None,
        duplicate_policy=DuplicatePolicy.REJECT,
    )


def default_display() -> DisplayConfig:
    return DisplayConfig(
        uppercase_queries=True,
        list_heading="Here is a sample schedule:",
    )


def default_export() -> ExportConfig:
    return ExportConfig(
        output_dir="output",
        document_title="ABCU Computer Science Course Catalog",
    )


def default_planner_config() -> PlannerConfig:
    """Vollständige Default-Konfiguration des Kursplaners."""
    return PlannerConfig(
        source=default_source(),
        display=default_display(),
        export=default_export(),
    )
