"""Tests for generator composition."""

from pewbench.generator import GeneratorChain, compose


def double(x):
    return x * 2


def to_list(n):
    return list(range(n))


class TestGeneratorChain:
    def test_identity(self):
        chain = GeneratorChain.identity()
        assert chain(1024) == 1024
        assert len(chain) == 0

    def test_compose_applies_in_registration_order(self):
        chain = compose(compose(GeneratorChain.identity(), double), to_list)
        assert chain(3) == to_list(double(3))
        assert chain.steps == (double, to_list)

    def test_then_is_compose(self):
        chain = GeneratorChain.identity().then(double).then(str)
        assert chain(21) == "42"
        assert len(chain) == 2

    def test_chains_are_immutable(self):
        base = GeneratorChain.identity().then(double)
        extended = base.then(double)
        assert base(5) == 10
        assert extended(5) == 20
        assert len(base) == 1

    def test_repr_lists_steps(self):
        chain = GeneratorChain.identity().then(double).then(to_list)
        assert repr(chain) == "GeneratorChain(range -> double -> to_list)"
