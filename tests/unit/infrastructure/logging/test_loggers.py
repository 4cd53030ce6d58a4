"""Unit tests for logger implementations.

Tests verify that:
1. ConsoleLogger and NullLogger implement LoggerPort
2. ConsoleLogger reports mapping progress and keeps statistics
3. NullLogger stays silent
"""

from io import StringIO
import unittest

from rich.console import Console

from column_mapper.application.ports.services import LoggerPort
from column_mapper.domain.entities import (
    Assignment,
    MatchKind,
    SummaryStats,
    TargetField,
)
from column_mapper.infrastructure.logging import (
    ConsoleLogger,
    LogContext,
    LogLevel,
    NullLogger,
)


def _mapped(name: str, target: str, confidence: float = 0.9) -> Assignment:
    return Assignment(
        source_column=name,
        target_field=TargetField(name=target),
        confidence=confidence,
        match_kind=MatchKind.CONTAINS,
        rationale="Name containment (50% overlap)",
    )


class TestLoggerPort(unittest.TestCase):
    """Test that logger implementations comply with LoggerPort protocol."""

    def test_console_logger_implements_loggerport(self):
        self.assertIsInstance(ConsoleLogger(), LoggerPort)

    def test_null_logger_implements_loggerport(self):
        self.assertIsInstance(NullLogger(), LoggerPort)

    def test_loggerport_has_required_methods(self):
        """LoggerPort protocol should define all required methods."""
        required_methods = {
            "info",
            "success",
            "warning",
            "error",
            "debug",
            "verbose",
            "log_mapping_start",
            "log_assignment",
            "log_summary",
        }
        protocol_methods = {
            name for name in dir(LoggerPort) if not name.startswith("_")
        }
        self.assertTrue(required_methods.issubset(protocol_methods))


class TestConsoleLogger(unittest.TestCase):
    """Test ConsoleLogger implementation."""

    def setUp(self):
        self.buffer = StringIO()
        self.console = Console(file=self.buffer, width=120)
        self.logger = ConsoleLogger(console=self.console, verbosity=LogLevel.DEBUG)

    def _output(self) -> str:
        return self.buffer.getvalue()

    def test_initialization(self):
        logger = ConsoleLogger()
        self.assertEqual(logger.verbosity, 0)
        self.assertIsNone(logger._context)
        self.assertEqual(logger._stats["files_processed"], 0)

    def test_info_logging(self):
        self.logger.info("Test message")
        self.assertIn("Test message", self._output())

    def test_info_respects_level(self):
        logger = ConsoleLogger(console=self.console, verbosity=LogLevel.NORMAL)
        logger.info("Hidden", level=LogLevel.VERBOSE)
        self.assertEqual(self._output().strip(), "")

    def test_warning_logging(self):
        """warning() should output message and increment warning count."""
        self.logger.warning("Warning message")
        self.assertIn("Warning message", self._output())
        self.assertEqual(self.logger._stats["warnings"], 1)

    def test_error_logging(self):
        self.logger.error("Error message")
        self.assertIn("Error message", self._output())
        self.assertEqual(self.logger._stats["errors"], 1)

    def test_verbose_and_debug_need_verbosity(self):
        normal_logger = ConsoleLogger(console=self.console, verbosity=LogLevel.NORMAL)
        normal_logger.verbose("Verbose message")
        normal_logger.debug("Debug message")
        self.assertEqual(self._output().strip(), "")

        self.logger.verbose("Verbose message")
        self.logger.debug("Debug message")
        self.assertIn("Verbose message", self._output())
        self.assertIn("Debug message", self._output())

    def test_context_management(self):
        self.logger.set_context(source_name="results.csv", operation="map")
        self.assertEqual(self.logger._context.source_name, "results.csv")
        self.assertEqual(self.logger._context.operation, "map")

        self.logger.clear_context()
        self.assertIsNone(self.logger._context)

    def test_log_mapping_start(self):
        self.logger.log_mapping_start("results.csv", 4, 6)

        output = self._output()
        self.assertIn("Mapping results.csv", output)
        self.assertIn("4 source columns, 6 target fields", output)
        self.assertEqual(self.logger.get_stats()["files_processed"], 1)

    def test_log_assignment_mapped(self):
        self.logger.log_assignment(_mapped("athlete", "name"))

        output = self._output()
        self.assertIn("athlete → name", output)
        self.assertIn("Name containment", output)
        self.assertEqual(self.logger.get_stats()["columns_mapped"], 1)

    def test_log_assignment_unmapped(self):
        self.logger.log_assignment(
            Assignment(source_column="extra", rationale="No target fields available")
        )

        self.assertIn("extra → (unmapped)", self._output())
        self.assertEqual(self.logger.get_stats()["columns_unmapped"], 1)

    def test_log_assignment_conflict(self):
        conflicted = _mapped("lap", "time", 0.3).model_copy(update={"conflict": True})

        self.logger.log_assignment(conflicted)

        stats = self.logger.get_stats()
        self.assertEqual(stats["conflicts"], 1)
        self.assertEqual(stats["columns_unmapped"], 1)
        self.assertEqual(stats["warnings"], 1)
        self.assertIn("Unresolved conflict for lap", self._output())

    def test_log_summary(self):
        summary = SummaryStats(
            total_columns=4,
            mapped_columns=3,
            unmapped_columns=1,
            high_confidence=2,
            medium_confidence=1,
            average_confidence=0.8,
        )

        self.logger.log_summary(summary)

        output = self._output()
        self.assertIn("Mapped 3/4 columns", output)
        self.assertIn("75% coverage", output)
        self.assertIn("Average confidence: 80.0%", output)

    def test_bracketed_names_are_printed_verbatim(self):
        self.logger.log_mapping_start("Time [s].csv", 1, 1)
        self.logger.log_assignment(_mapped("lap[/b]", "Time [s]"))

        output = self._output()
        self.assertIn("Mapping Time [s].csv", output)
        self.assertIn("lap[/b] → Time [s]", output)
        self.assertEqual(self.logger.get_stats()["columns_mapped"], 1)

    def test_bracketed_conflict_warning(self):
        conflicted = _mapped("lap[/b]", "time[/i]", 0.3).model_copy(
            update={"conflict": True}
        )

        self.logger.log_assignment(conflicted)

        self.assertIn(
            "Unresolved conflict for lap[/b]: time[/i] is already taken",
            self._output(),
        )

    def test_plain_messages_are_escaped(self):
        self.logger.error("results.csv: unknown column 'x[/red]'")
        self.logger.warning("No target fields found in [fields].json")

        output = self._output()
        self.assertIn("unknown column 'x[/red]'", output)
        self.assertIn("[fields].json", output)

    def test_summary_uses_configured_high_threshold(self):
        logger = ConsoleLogger(
            console=self.console, verbosity=LogLevel.VERBOSE, high_threshold=0.9
        )

        logger.log_summary(
            SummaryStats(total_columns=1, mapped_columns=1, high_confidence=1)
        )

        self.assertIn("High (≥90%): 1", self._output())

    def test_stats_tracking(self):
        self.logger.log_mapping_start("a.csv", 1, 1)
        self.assertEqual(self.logger.get_stats()["files_processed"], 1)

        self.logger.reset_stats()
        self.assertEqual(self.logger.get_stats()["files_processed"], 0)

    def test_final_stats(self):
        self.logger.log_assignment(_mapped("athlete", "name"))
        self.logger.log_final_stats()
        self.assertIn("Columns mapped: 1", self._output())


class TestNullLogger(unittest.TestCase):
    """Test NullLogger for silent testing."""

    def test_null_logger_accepts_all_calls(self):
        logger = NullLogger()

        logger.info("Info message")
        logger.success("Success message")
        logger.warning("Warning message")
        logger.error("Error message")
        logger.debug("Debug message")
        logger.verbose("Verbose message")
        logger.log_mapping_start("a.csv", 1, 1)
        logger.log_assignment(_mapped("athlete", "name"))
        logger.log_summary(SummaryStats())


class TestLogContext(unittest.TestCase):
    """Test LogContext dataclass."""

    def test_log_context_creation(self):
        context = LogContext()
        self.assertEqual(context.source_name, "")
        self.assertEqual(context.operation, "")
        self.assertIsNotNone(context.start_time)

    def test_log_context_elapsed_time(self):
        import time

        context = LogContext()
        time.sleep(0.01)
        self.assertGreater(context.elapsed_ms(), 5)


if __name__ == "__main__":
    unittest.main()
