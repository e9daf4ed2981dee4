from django.test import RequestFactory, SimpleTestCase, override_settings

from core.home.error_model import ErrorViewModel
from core.home.middleware import trace_id_from_traceparent


class ErrorViewModelTests(SimpleTestCase):
    def test_safe_message_precedence(self):
        self.assertEqual(
            ErrorViewModel(error_message="Custom", status_code=500).get_safe_error_message(),
            "Custom",
        )
        self.assertEqual(
            ErrorViewModel(status_code=503).get_safe_error_message(),
            "An error occurred (Status Code: 503)",
        )
        self.assertEqual(
            ErrorViewModel().get_safe_error_message(),
            "An unexpected error occurred while processing your request.",
        )

    def test_status_code_descriptions(self):
        expected = {
            400: "Bad Request",
            401: "Unauthorized",
            403: "Forbidden",
            404: "Page Not Found",
            500: "Internal Server Error",
            502: "Bad Gateway",
            503: "Service Unavailable",
            None: "An error occurred",
            418: "An error occurred",
        }
        for code, description in expected.items():
            with self.subTest(code=code):
                self.assertEqual(
                    ErrorViewModel(status_code=code).status_code_description, description
                )

    def test_details_require_flag_and_development(self):
        details = {
            "exception_type": "ValueError",
            "exception_message": "bad",
            "stack_trace": "Traceback ...",
        }
        cases = [
            (True, "Development", True),
            (True, "DEVELOPMENT", True),
            (False, "Development", False),
            (True, "Production", False),
            (True, "Staging", False),
        ]
        for flag, environment, shown in cases:
            with self.subTest(flag=flag, environment=environment):
                model = ErrorViewModel(
                    show_detailed_error=flag, environment=environment, **details
                )
                self.assertEqual(model.should_show_stack_trace(), shown)
                self.assertEqual(model.should_show_exception_details(), shown)

    def test_no_stack_trace_means_nothing_to_show(self):
        model = ErrorViewModel(show_detailed_error=True, environment="Development")

        self.assertFalse(model.should_show_stack_trace())
        self.assertFalse(model.should_show_exception_details())

    @override_settings(SHOW_DETAILED_ERRORS=True, ENVIRONMENT="Development")
    def test_from_request_captures_exception(self):
        request = RequestFactory().get("/Employees")
        request.request_id = "abc123"
        try:
            raise KeyError("missing")
        except KeyError as exc:
            model = ErrorViewModel.from_request(request, status_code=500, exception=exc)

        self.assertEqual(model.request_id, "abc123")
        self.assertTrue(model.show_request_id)
        self.assertEqual(model.exception_type, "KeyError")
        self.assertIn("Traceback", model.stack_trace)
        self.assertEqual(model.request_path, "/Employees")
        self.assertEqual(model.http_method, "GET")
        self.assertTrue(model.should_show_stack_trace())


class TraceparentTests(SimpleTestCase):
    def test_valid_header(self):
        self.assertEqual(
            trace_id_from_traceparent(
                "00-4bf92f3577b34da6a3ce929d0e0e4736-00f067aa0ba902b7-01"
            ),
            "4bf92f3577b34da6a3ce929d0e0e4736",
        )

    def test_invalid_headers(self):
        for header in (
            None,
            "",
            "garbage",
            "00-00000000000000000000000000000000-00f067aa0ba902b7-01",
            "00-4bf92f3577b34da6a3ce929d0e0e4736-01",
        ):
            with self.subTest(header=header):
                self.assertIsNone(trace_id_from_traceparent(header))
