import math
import itertools
import sympy as sp
from abc import ABC, abstractmethod
from typing import Callable, FrozenSet, List, Mapping, Optional, Tuple
from .operators import (
  NodeType, UNDEFINED, BINARY_SYMBOLS,
  fold_add, fold_divide, fold_multiply, fold_principal_sqrt
)
from ...extent import Extent

Substitutions = Mapping[str, 'Node']


class Node(ABC):
  """Immutable expression node.

  Trees are built bottom-up and never modified; every simplification step
  builds new nodes. ``simplify`` always returns a non-empty list of
  candidates, more than one when a two-valued square root is involved.
  """

  __slots__ = ('_hash_cache',)

  def __init__(self):
    object.__setattr__(self, '_hash_cache', None)

  def __setattr__(self, name, value):
    raise AttributeError(f"{type(self).__name__} is immutable")

  def __delattr__(self, name):
    raise AttributeError(f"{type(self).__name__} is immutable")

  def _assign(self, **fields):
    for field, value in fields.items():
      object.__setattr__(self, field, value)

  @property
  @abstractmethod
  def node_type(self) -> NodeType:
    pass

  @abstractmethod
  def variables(self) -> FrozenSet[str]:
    pass

  @abstractmethod
  def simplify(self, substitutions: Substitutions) -> List['Node']:
    pass

  @abstractmethod
  def to_string(self) -> str:
    pass

  @abstractmethod
  def to_sympy(self) -> sp.Expr:
    pass

  @abstractmethod
  def size(self) -> int:
    pass

  @abstractmethod
  def _key(self) -> Tuple:
    pass

  def __eq__(self, other) -> bool:
    if not isinstance(other, Node):
      return NotImplemented
    return self._key() == other._key()

  def __hash__(self) -> int:
    if self._hash_cache is None:
      object.__setattr__(self, '_hash_cache', hash(self._key()))
    return self._hash_cache

  def __repr__(self) -> str:
    return f"{type(self).__name__}<{self.to_string()}>"


class VariableNode(Node):
  __slots__ = ('name',)

  def __init__(self, name: str):
    super().__init__()
    if not isinstance(name, str) or not name:
      raise ValueError(f"Variable name must be a non-empty string, got {name!r}")
    self._assign(name=name)

  @property
  def node_type(self) -> NodeType:
    return NodeType.VARIABLE

  def variables(self) -> FrozenSet[str]:
    return frozenset((self.name,))

  def simplify(self, substitutions: Substitutions) -> List[Node]:
    # The bound expression is handed back as-is, not simplified again
    bound = substitutions.get(self.name)
    if bound is None:
      return [self]
    return [bound]

  def to_string(self) -> str:
    return self.name

  def to_sympy(self) -> sp.Expr:
    return sp.Symbol(self.name)

  def size(self) -> int:
    return 1

  def _key(self) -> Tuple:
    return (NodeType.VARIABLE, self.name)


class ConstantNode(Node):
  __slots__ = ('value',)

  def __init__(self, value: float):
    super().__init__()
    self._assign(value=float(value))

  @classmethod
  def undefined(cls) -> 'ConstantNode':
    return cls(UNDEFINED)

  @property
  def is_undefined(self) -> bool:
    return math.isnan(self.value)

  @property
  def node_type(self) -> NodeType:
    return NodeType.CONSTANT

  def variables(self) -> FrozenSet[str]:
    return frozenset()

  def simplify(self, substitutions: Substitutions) -> List[Node]:
    return [self]

  def to_string(self) -> str:
    return format_number(self.value)

  def to_sympy(self) -> sp.Expr:
    if self.is_undefined:
      return sp.nan
    if self.value.is_integer():
      return sp.Integer(int(self.value))
    return sp.Float(self.value)

  def size(self) -> int:
    return 1

  def _key(self) -> Tuple:
    # All undefined constants compare equal, unlike NaN itself
    return (NodeType.CONSTANT, None if self.is_undefined else self.value)


def format_number(value: float) -> str:
  if math.isnan(value):
    return "undefined"
  if value.is_integer():
    return str(int(value))
  return repr(value)


def _is_undefined_constant(node: Node) -> bool:
  return isinstance(node, ConstantNode) and node.is_undefined


def _combine(left: Node, right: Node, substitutions: Substitutions,
             fold: Callable[[float, float], float],
             rebuild: Callable[[Node, Node], Node]) -> List[Node]:
  """Cartesian product of both child candidate lists, folded pairwise"""
  results: List[Node] = []
  left_candidates = left.simplify(substitutions)
  right_candidates = right.simplify(substitutions)
  for left_c, right_c in itertools.product(left_candidates, right_candidates):
    if _is_undefined_constant(left_c) or _is_undefined_constant(right_c):
      results.append(ConstantNode.undefined())
    elif isinstance(left_c, ConstantNode) and isinstance(right_c, ConstantNode):
      results.append(ConstantNode(fold(left_c.value, right_c.value)))
    else:
      results.append(rebuild(left_c, right_c))
  return results


class BinaryOpNode(Node):
  __slots__ = ('left', 'right')

  def __init__(self, left: Node, right: Node):
    super().__init__()
    self._assign(left=left, right=right)

  def variables(self) -> FrozenSet[str]:
    return self.left.variables() | self.right.variables()

  def to_string(self) -> str:
    symbol = BINARY_SYMBOLS[self.node_type]
    return f"({self.left.to_string()} {symbol} {self.right.to_string()})"

  def size(self) -> int:
    return 1 + self.left.size() + self.right.size()

  def _key(self) -> Tuple:
    return (self.node_type, self.left._key(), self.right._key())


class AddNode(BinaryOpNode):
  __slots__ = ()

  @property
  def node_type(self) -> NodeType:
    return NodeType.ADD

  def simplify(self, substitutions: Substitutions) -> List[Node]:
    return _combine(self.left, self.right, substitutions, fold_add, AddNode)

  def to_string(self) -> str:
    negated = _negated_operand(self.right)
    if negated is not None:
      return f"({self.left.to_string()} - {negated.to_string()})"
    return super().to_string()

  def to_sympy(self) -> sp.Expr:
    return sp.Add(self.left.to_sympy(), self.right.to_sympy(), evaluate=False)


class DivideNode(BinaryOpNode):
  __slots__ = ()

  @property
  def node_type(self) -> NodeType:
    return NodeType.DIVIDE

  @property
  def is_product(self) -> bool:
    """True for the multiplication form a / (1 / b)"""
    return is_reciprocal(self.right)

  def simplify(self, substitutions: Substitutions) -> List[Node]:
    if self.is_product:
      return _combine(self.left, self.right.right, substitutions, fold_multiply, multiply)
    return _combine(self.left, self.right, substitutions, fold_divide, DivideNode)

  def to_string(self) -> str:
    if self.is_product:
      return f"({self.left.to_string()} * {self.right.right.to_string()})"
    return super().to_string()

  def to_sympy(self) -> sp.Expr:
    if self.is_product:
      return sp.Mul(self.left.to_sympy(), self.right.right.to_sympy(), evaluate=False)
    return sp.Mul(self.left.to_sympy(), sp.Pow(self.right.to_sympy(), -1, evaluate=False), evaluate=False)


class UnaryOpNode(Node):
  __slots__ = ('operand',)

  def __init__(self, operand: Node):
    super().__init__()
    self._assign(operand=operand)

  def variables(self) -> FrozenSet[str]:
    return self.operand.variables()

  def size(self) -> int:
    return 1 + self.operand.size()

  def _key(self) -> Tuple:
    return (self.node_type, self.operand._key())


class PrincipalSqrtNode(UnaryOpNode):
  """Non-negative square root, undefined for negative operands"""

  __slots__ = ()

  @property
  def node_type(self) -> NodeType:
    return NodeType.PRINCIPAL_SQRT

  def simplify(self, substitutions: Substitutions) -> List[Node]:
    results: List[Node] = []
    for candidate in self.operand.simplify(substitutions):
      if isinstance(candidate, ConstantNode):
        results.append(ConstantNode(fold_principal_sqrt(candidate.value)))
      else:
        results.append(PrincipalSqrtNode(candidate))
    return results

  def to_string(self) -> str:
    return f"sqrt({self.operand.to_string()})"

  def to_sympy(self) -> sp.Expr:
    return sp.sqrt(self.operand.to_sympy(), evaluate=False)


class SqrtNode(UnaryOpNode):
  """Two-valued square root: the principal root and its negation.

  This is the only node that adds branches by itself; every other node just
  carries its children's branches through the Cartesian product.
  """

  __slots__ = ()

  @property
  def node_type(self) -> NodeType:
    return NodeType.SQRT

  def simplify(self, substitutions: Substitutions) -> List[Node]:
    results: List[Node] = []
    for candidate in PrincipalSqrtNode(self.operand).simplify(substitutions):
      results.append(candidate)
      # The candidate is already substituted, so negate it under an empty mapping
      results.extend(negate(candidate).simplify({}))
    return results

  def to_string(self) -> str:
    return f"±sqrt({self.operand.to_string()})"

  def to_sympy(self) -> sp.Expr:
    from ..utils.sympy_utils import PlusMinus
    return PlusMinus(sp.sqrt(self.operand.to_sympy(), evaluate=False))


class RestrictToNode(UnaryOpNode):
  """Passes its operand's value through only while it lies within an extent"""

  __slots__ = ('extent',)

  def __init__(self, operand: Node, extent: Extent):
    super().__init__(operand)
    if not isinstance(extent, Extent):
      extent = Extent(*extent)
    self._assign(extent=extent)

  @property
  def node_type(self) -> NodeType:
    return NodeType.RESTRICT_TO

  def simplify(self, substitutions: Substitutions) -> List[Node]:
    results: List[Node] = []
    for candidate in self.operand.simplify(substitutions):
      if isinstance(candidate, ConstantNode):
        if not candidate.is_undefined and self.extent.contains(candidate.value):
          results.append(candidate)
        else:
          results.append(ConstantNode.undefined())
      else:
        results.append(RestrictToNode(candidate, self.extent))
    return results

  def to_string(self) -> str:
    low = format_number(self.extent.min)
    high = format_number(self.extent.max)
    return f"restrict({self.operand.to_string()}, [{low}, {high}])"

  def to_sympy(self) -> sp.Expr:
    from ..utils.sympy_utils import Restrict
    return Restrict(self.operand.to_sympy(), ConstantNode(self.extent.min).to_sympy(),
                    ConstantNode(self.extent.max).to_sympy())

  def _key(self) -> Tuple:
    return (NodeType.RESTRICT_TO, self.operand._key(), self.extent.min, self.extent.max)


# Derived operators build canonical Add/Divide trees rather than new node types

def is_reciprocal(node: Node) -> bool:
  return (isinstance(node, DivideNode) and isinstance(node.left, ConstantNode)
          and node.left.value == 1.0)


def multiply(left: Node, right: Node) -> DivideNode:
  return DivideNode(left, DivideNode(ConstantNode(1.0), right))


def subtract(left: Node, right: Node) -> AddNode:
  return AddNode(left, multiply(right, ConstantNode(-1.0)))


def negate(operand: Node) -> DivideNode:
  return multiply(operand, ConstantNode(-1.0))


def square(operand: Node) -> DivideNode:
  return multiply(operand, operand)


def _negated_operand(node: Node) -> Optional[Node]:
  """Return b when node is the negation form b * -1"""
  if (isinstance(node, DivideNode) and node.is_product
      and isinstance(node.right.right, ConstantNode) and node.right.right.value == -1.0):
    return node.left
  return None
