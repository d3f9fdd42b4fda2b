"""Tests for output sanitizer: card and email redaction in logs and error text."""
from storefront_checkout.errors import CheckoutError, StepTimeoutError
from storefront_checkout.output_sanitizer import sanitize_output, redact_card_number, redact_email


class TestCardRedaction:
    def test_redact_full_card_number(self):
        assert redact_card_number("4242424242424242") == "****-****-****-4242"

    def test_redact_card_with_spaces(self):
        assert redact_card_number("4242 4242 4242 1234") == "****-****-****-1234"

    def test_short_number_returns_stars(self):
        assert redact_card_number("123") == "****"


class TestEmailRedaction:
    def test_redact_email(self):
        assert redact_email("jane.doe@example.com") == "j***@example.com"

    def test_no_at_sign(self):
        assert redact_email("not-an-email") == "not-an-email"


class TestSanitizeOutput:
    def test_redacts_card_numbers(self):
        result = sanitize_output('locator.fill("4242 4242 4242 4242")')
        assert "4242 4242" not in result
        assert "[CARD REDACTED]" in result

    def test_redacts_emails(self):
        assert sanitize_output("filled spree_user_1@example.com") == "filled s***@example.com"

    def test_strips_ansi(self):
        assert sanitize_output("\x1b[31mTimeout\x1b[0m") == "Timeout"

    def test_truncates(self):
        result = sanitize_output("x" * 100, max_chars=10)
        assert result.startswith("x" * 10)
        assert "truncated at 10 chars" in result

    def test_zip_code_left_alone(self):
        assert sanitize_output("zip 10001") == "zip 10001"


class TestErrorText:
    def test_error_message_is_sanitized(self):
        error = CheckoutError(
            "fill failed",
            operation="fill card number",
            cause=RuntimeError('waiting for fill("4242 4242 4242 4242")'),
        )
        text = str(error)
        assert text.startswith("fill card number: fill failed")
        assert "RuntimeError" in text
        assert "4242 4242" not in text

    def test_timeout_error_reports_timeout(self):
        error = StepTimeoutError("payment form missing", timeout_ms=15000)
        assert "15000ms" in str(error)
        assert error.timeout_ms == 15000
