"""Search agendas, tree stacks, pushdowns, storage symbols and equivalence relations."""

__version__ = "0.1.0"