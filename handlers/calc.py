"""Arithmetic handler for /calc/<op>/<a>/<b> requests."""

import re
from dataclasses import dataclass

from config import MAX_CALC_SEGMENT_LENGTH
from request import HTTPRequest
from response import HTTPResponse, text_response

_SEGMENT = f"[^/]{{1,{MAX_CALC_SEGMENT_LENGTH}}}"
CALC_PATH_PATTERN = re.compile(
    rf"/calc/(?P<operation>{_SEGMENT})/(?P<operand1>{_SEGMENT})"
    rf"/(?P<operand2>\S{{1,{MAX_CALC_SEGMENT_LENGTH}}})",
    re.ASCII,
)
# Longest leading decimal or hexadecimal float; text without one parses as 0.0.
_LEADING_FLOAT = re.compile(
    r"\s*[+-]?(?:"
    r"(?P<hex>0x(?:[0-9a-f]+\.?[0-9a-f]*|\.[0-9a-f]+)(?:p[+-]?\d+)?)"
    r"|(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?"
    r"|inf(?:inity)?|nan)",
    re.IGNORECASE | re.ASCII,
)

INVALID_FORMAT = "Invalid /calc request format."
DIVISION_BY_ZERO = "Division by zero."
INVALID_OPERATION = "Invalid operation."


class CalcFormatError(ValueError):
    """Calc path did not contain operation and two operand segments."""

    def __init__(self, message: str = INVALID_FORMAT, *, status_code: int = 400) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass(slots=True)
class CalcRequest:
    operation: str
    operand1: str
    operand2: str

    @classmethod
    def from_path(cls, path: str) -> "CalcRequest":
        """Split /calc/<op>/<a>/<b> into segments.

        op and a are 1-15 characters without slashes. b is read as at most
        15 non-whitespace characters; anything after that is ignored.
        """
        match = CALC_PATH_PATTERN.match(path)
        if match is None:
            raise CalcFormatError()
        return cls(**match.groupdict())


def parse_operand(text: str) -> float:
    """Parse a number leniently: unparseable text yields 0.0."""
    match = _LEADING_FLOAT.match(text)
    if match is None:
        return 0.0
    number = match.group()
    if match.group("hex"):
        try:
            return float.fromhex(number)
        except OverflowError:
            return float("-inf") if number.lstrip().startswith("-") else float("inf")
    return float(number)


def calculate(operation: str, operand1: str, operand2: str) -> HTTPResponse:
    first = parse_operand(operand1)
    second = parse_operand(operand2)

    if operation == "add":
        result = first + second
    elif operation == "mul":
        result = first * second
    elif operation == "div":
        if second == 0.0:
            return text_response(400, DIVISION_BY_ZERO)
        result = first / second
    else:
        return text_response(400, INVALID_OPERATION)

    return text_response(200, f"Result: {result:.2f}\n")


def handle_calc(request: HTTPRequest) -> HTTPResponse:
    try:
        calc_request = CalcRequest.from_path(request.path)
    except CalcFormatError as exc:
        return text_response(exc.status_code, str(exc))
    return calculate(calc_request.operation, calc_request.operand1, calc_request.operand2)
