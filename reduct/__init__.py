# Core type aliases and entry points for Reduct.
#
# Everything in Reduct is a Value: Symbol, String, Placeholder or Table.
# Code and data share that representation, so the reader's output is fed
# straight to the reducer and the reducer's output straight to the printer.

from reduct.types.value import Value
from reduct.types.symbol import Symbol
from reduct.types.string import String
from reduct.types.placeholder import Placeholder
from reduct.types.table import Table, with_
from reduct.reader.parser import read
from reduct.printer import to_canonical, to_pretty
from reduct.evaluation.lookup import lookup, universal_lookup
from reduct.evaluation.evaluator import evaluate_step
from reduct.evaluation.driver import reduce, Reduction, TerminalCondition

__all__ = [
    "Value", "Symbol", "String", "Placeholder", "Table", "with_",
    "read", "to_canonical", "to_pretty",
    "lookup", "universal_lookup", "evaluate_step",
    "reduce", "Reduction", "TerminalCondition",
]
