import math
import numbers
import sympy as sp
from typing import Dict, FrozenSet, List, Mapping, Union
from .core.node import Node, ConstantNode

Bindable = Union[Node, 'Expression', float, int]


def _as_node(value: Bindable) -> Node:
  if isinstance(value, Expression):
    return value.root
  if isinstance(value, Node):
    return value
  if isinstance(value, numbers.Real):
    return ConstantNode(float(value))
  raise TypeError(f"Cannot bind {value!r} to a variable")


class Expression:
  """User facing handle on an immutable expression tree"""

  __slots__ = ('root', '_string_cache')

  def __init__(self, root: Node):
    self.root = root
    self._string_cache = None

  def variables(self) -> FrozenSet[str]:
    return self.root.variables()

  def simplify(self, substitutions: Mapping[str, Bindable] = None) -> List['Expression']:
    bound: Dict[str, Node] = {
      name: _as_node(value) for name, value in (substitutions or {}).items()
    }
    return [Expression(candidate) for candidate in self.root.simplify(bound)]

  def evaluate(self, **values: float) -> List[float]:
    """Numeric value of every candidate, NaN where undefined or still symbolic"""
    results = []
    for candidate in self.simplify(values):
      node = candidate.root
      results.append(node.value if isinstance(node, ConstantNode) else math.nan)
    return results

  def to_string(self) -> str:
    if self._string_cache is None:
      self._string_cache = self.root.to_string()
    return self._string_cache

  def to_sympy(self) -> sp.Expr:
    return self.root.to_sympy()

  def to_latex(self) -> str:
    from .utils.sympy_utils import to_latex
    return to_latex(self.root)

  def size(self) -> int:
    return self.root.size()

  @classmethod
  def from_string(cls, expr_str: str) -> 'Expression':
    from .utils.sympy_utils import parse_expression
    return cls(parse_expression(expr_str))

  def __hash__(self) -> int:
    return hash(self.root)

  def __eq__(self, other) -> bool:
    if not isinstance(other, Expression):
      return False
    return self.root == other.root

  def __repr__(self) -> str:
    return f"Expression({self.to_string()})"
