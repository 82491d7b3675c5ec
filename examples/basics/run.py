"""Run a handful of checks programmatically and print the report."""
from caserun import TestCase, run_tests
from caserun.validators import validate_array, validate_number, validate_object, validate_string

TEST_USER = {
    "username": "qaengineer",
    "password": "testpass123",
    "userId": 12345,
    "roles": ["admin", "tester"],
    "metadata": {"department": "QA"},
}


def main() -> int:
    cases = [
        TestCase(name="1 + 1 equals 2", test_fn=lambda: 1 + 1, expected_result=2),
        TestCase(name="String concatenation", test_fn=lambda: "hello" + " " + "world", expected_result="hello world"),
        TestCase(name="Array length", test_fn=lambda: len([1, 2, 3]), expected_result=3),
        TestCase(name="Boolean comparison", test_fn=lambda: 5 > 3, expected_result=True),
        TestCase(
            name="username is valid",
            test_fn=lambda: validate_string(TEST_USER["username"], "username").valid,
            expected_result=True,
        ),
        TestCase(
            name="userId is valid",
            test_fn=lambda: validate_number(TEST_USER["userId"], "userId").valid,
            expected_result=True,
        ),
        TestCase(
            name="roles is valid",
            test_fn=lambda: validate_array(TEST_USER["roles"], "roles").valid,
            expected_result=True,
        ),
        TestCase(
            name="metadata has department",
            test_fn=lambda: validate_object(TEST_USER["metadata"], "metadata", ["department"]).message,
            expected_result="metadata is valid.",
        ),
    ]
    summary = run_tests(cases, use_color=True)
    return 0 if summary.failed == 0 else 1


if __name__ == "__main__":
    raise SystemExit(main())
