import json
import random

from gmpy2 import mpz
from pytest import fixture


@fixture
def rng():
    return random.Random(1729)


@fixture
def polynomial_points():
    def _polynomial_points(coeffs, xs):
        """
        Evaluates the polynomial with coefficients ``coeffs`` (constant term
        first) at each of ``xs``.

        :return: list of ``(x, f(x))`` pairs
        """
        return [(x, sum(c * x ** i for i, c in enumerate(coeffs))) for x in xs]

    return _polynomial_points


@fixture
def input_document():
    def _input_document(k, points, base=10):
        """Builds an input document with every y written in ``base``."""
        data = {"keys": {"n": len(points), "k": k}}
        for x, y in points:
            data[str(x)] = {"base": str(base), "value": mpz(y).digits(base)}
        return data

    return _input_document


@fixture
def input_file(tmp_path):
    def _input_file(data, name="input.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data))
        return path

    return _input_file
