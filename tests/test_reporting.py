import io
import unittest

from port_check.cli import CheckRequest
from port_check.prober import CheckOutcome
from port_check.reporting import checking_line, report_fatal, report_outcome
from port_check.resolver import ResolvedAddress


class ReportingTests(unittest.TestCase):
    def setUp(self) -> None:
        self.request = CheckRequest(hostname="localhost", port=22, timeout_seconds=1)
        self.primary = ResolvedAddress("127.0.0.1", 22)

    def test_checking_line(self) -> None:
        self.assertEqual(
            checking_line(self.request, self.primary),
            "Checking localhost:22 (127.0.0.1) (timeout: 1s)",
        )

    def test_success_names_the_address_that_worked(self) -> None:
        out = io.StringIO()
        outcome = CheckOutcome(succeeded_address=ResolvedAddress("::1", 22))
        code = report_outcome(self.request, self.primary, outcome, out)
        self.assertEqual(code, 0)
        self.assertEqual(out.getvalue(), "✓ Connection to localhost:22 (::1) succeeded - port is open\n")

    def test_failure_names_primary_address_and_reason(self) -> None:
        out = io.StringIO()
        outcome = CheckOutcome(failure_reason="port closed or unreachable (timed out)")
        code = report_outcome(self.request, self.primary, outcome, out)
        self.assertEqual(code, 1)
        self.assertEqual(
            out.getvalue(),
            "✗ Connection to localhost:22 (127.0.0.1) failed - port closed or unreachable (timed out)\n",
        )

    def test_fatal(self) -> None:
        err = io.StringIO()
        self.assertEqual(report_fatal("No addresses found for hostname 'x'", err), 1)
        self.assertEqual(err.getvalue(), "✗ No addresses found for hostname 'x'\n")


if __name__ == "__main__":
    unittest.main()
