"""Testing helpers for metalfresnel operators.

Example usage:

    import hypothesis

    from metalfresnel.shading import complex_fresnel
    from metalfresnel.testing.strategies import cosines, optical_constants

    @hypothesis.given(optical_constants(), optical_constants(), cosines())
    def test_in_unit_interval(n, k, cosine):
        result = complex_fresnel(n, k, cosine)
        assert ((result >= 0) & (result <= 1)).all()
"""

from . import strategies

__all__ = [
    "strategies",
]
