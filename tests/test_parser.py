"""Tests for polynomial literal and argument parsing."""

import pytest

from polycalc.calc.errors import WrongPoly
from polycalc.calc.parser import parse_coeff, parse_index, parse_poly
from polycalc.config import Config
from polycalc.core.poly import COEFF_MAX, COEFF_MIN, EXP_MAX, Const, Mono, Sum, format_poly, var


class TestParsePoly:
    def test_constants(self):
        assert parse_poly("42") == 42
        assert parse_poly("-7") == -7
        assert parse_poly("007") == 7
        assert parse_poly("-0") == 0

    def test_coefficient_bounds(self):
        assert parse_poly(str(COEFF_MAX)) == COEFF_MAX
        assert parse_poly(str(COEFF_MIN)) == COEFF_MIN
        with pytest.raises(WrongPoly):
            parse_poly(str(COEFF_MAX + 1))
        with pytest.raises(WrongPoly):
            parse_poly(str(COEFF_MIN - 1))

    def test_single_monomial(self):
        assert parse_poly("(3,2)") == Sum([Mono(2, Const(3))])

    def test_nested(self):
        p = parse_poly("(1,0)+((2,1),3)")
        assert p == Sum([Mono(0, Const(1)), Mono(3, Sum([Mono(1, Const(2))]))])

    def test_normalizes(self):
        assert parse_poly("(1,2)+(1,2)") == Sum([Mono(2, Const(2))])
        assert parse_poly("(2,3)+(1,1)") == Sum([Mono(1, Const(1)), Mono(3, Const(2))])
        assert parse_poly("(0,1)") == 0
        assert parse_poly("(5,0)") == 5
        assert parse_poly("(1,2)+(-1,2)") == 0
        assert parse_poly("((1,1),0)") == Sum([Mono(0, var(0))])

    def test_exponent_bounds(self):
        assert parse_poly(f"(1,{EXP_MAX})").monos[0].exp == EXP_MAX
        with pytest.raises(WrongPoly):
            parse_poly(f"(1,{EXP_MAX + 1})")

    def test_custom_exponent_bound(self):
        config = Config(exp_max=10)
        assert parse_poly("(1,10)", config).monos[0].exp == 10
        with pytest.raises(WrongPoly):
            parse_poly("(1,11)", config)

    @pytest.mark.parametrize("text", [
        "",
        "-",
        "+1",
        " 1",
        "1 ",
        "1-",
        "(1,2",
        "(1,2)+",
        "(1,-2)",
        "(1,+2)",
        "(1 ,2)",
        "(1,2)(1,3)",
        "((1,2),3",
        "(,2)",
        "(1,)",
        "()",
        "x",
        "(1,2)+ (1,3)",
        "1\r",
    ])
    def test_malformed(self, text):
        with pytest.raises(WrongPoly):
            parse_poly(text)

    @pytest.mark.parametrize("text", [
        "0",
        "-15",
        "(1,1)",
        "(-3,0)+(1,1)",
        "((1,1),0)+(3,2)",
        "(((4,2),1)+(-1,3),0)+(2,5)",
    ])
    def test_printer_inverse(self, text):
        assert format_poly(parse_poly(text)) == text


class TestArguments:
    def setup_method(self):
        self.config = Config()

    def test_index(self):
        assert parse_index("0", self.config) == 0
        assert parse_index("18446744073709551615", self.config) == (1 << 64) - 1

    @pytest.mark.parametrize("text", ["", "-1", "+1", "1a", " 1", "18446744073709551616"])
    def test_index_invalid(self, text):
        with pytest.raises(ValueError):
            parse_index(text, self.config)

    def test_coeff(self):
        assert parse_coeff("-5", self.config) == -5
        assert parse_coeff(str(COEFF_MIN), self.config) == COEFF_MIN

    @pytest.mark.parametrize("text", ["", "-", "1.5", "x", str(COEFF_MAX + 1)])
    def test_coeff_invalid(self, text):
        with pytest.raises(ValueError):
            parse_coeff(text, self.config)
