"""Tests for the @seam decorator and explicit binding."""

import pytest

from seamstubs.errors import ConfigurationError
from seamstubs.seam import SeamIdentity, bind, is_seam, seam, seam_identity


@seam
def greet(name, punctuation="!"):
    """Say hello."""
    return f"hello {name}{punctuation}"


@seam(owner="app.clock", name="now")
def current_time():
    return "real time"


def plain(x):
    return x


class TestSeamDecorator:
    def test_calls_real_function_when_nothing_is_bound(self):
        """An unstubbed seam is transparent."""
        assert greet("bob") == "hello bob!"
        assert greet("bob", punctuation="?") == "hello bob?"

    def test_preserves_metadata(self):
        """The wrapper keeps the wrapped function's name and docstring."""
        assert greet.__name__ == "greet"
        assert greet.__doc__ == "Say hello."

    def test_identity_defaults_to_module_and_qualname(self):
        assert seam_identity(greet) == SeamIdentity(__name__, "greet")

    def test_identity_can_be_named(self):
        """owner and name can be given explicitly."""
        assert seam_identity(current_time) == SeamIdentity("app.clock", "now")
        assert str(seam_identity(current_time)) == "app.clock.now"

    def test_non_seam_has_no_identity(self):
        assert not is_seam(plain)
        with pytest.raises(ConfigurationError) as exc_info:
            seam_identity(plain)
        assert "decorate it with @seam" in str(exc_info.value)

    def test_keyword_only_parameters_are_rejected(self):
        """Stubs match positionally, so keyword-only parameters cannot be seams."""
        with pytest.raises(ConfigurationError):

            @seam
            def configure(*, verbose):
                return verbose

    def test_var_keyword_parameters_are_rejected(self):
        with pytest.raises(ConfigurationError):

            @seam
            def configure(**options):
                return options


class TestExplicitBinding:
    def test_bound_calculator_answers_calls(self):
        """Binding a calculator redirects calls of that arity."""
        bind(__name__, "greet", 1, lambda name: f"stubbed {name}")
        assert greet("bob") == "stubbed bob"

    def test_other_arities_still_reach_the_real_function(self):
        bind(__name__, "greet", 1, lambda name: f"stubbed {name}")
        assert greet("bob", "?") == "hello bob?"

    def test_keyword_arguments_are_normalized_to_positions(self):
        """Arguments passed by keyword count toward the positional arity."""
        bind(__name__, "greet", 2, lambda name, punctuation: f"{name}{punctuation}")
        assert greet("bob", punctuation="?") == "bob?"

    def test_zero_argument_seam(self):
        bind("app.clock", "now", 0, lambda: "frozen")
        assert current_time() == "frozen"
