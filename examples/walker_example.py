#!/usr/bin/env python3
"""Example demonstrating visitors and walkers on a small expression tree.

The expression classes below know nothing about printing or evaluation: both
operations are defined externally, one specialization per class.
"""

from typing import List

from dispatchkit import VisitPhase, Visitor, Walker


class Expr:
    pass


class Num(Expr):
    def __init__(self, value: int):
        self.value = value


class Add(Expr):
    def __init__(self, *operands: Expr):
        self.operands = list(operands)


class Mul(Expr):
    def __init__(self, *operands: Expr):
        self.operands = list(operands)


class ExprWalker(Walker[Expr]):
    def children(self, node: Expr) -> List[Expr]:
        return getattr(node, "operands", [])


def print_infix(expr: Expr) -> str:
    """Print an expression in infix notation using pre/in/post visits."""
    parts: List[str] = []
    walker = ExprWalker(VisitPhase.PRE, VisitPhase.IN, VisitPhase.POST)
    walker.register(Num, VisitPhase.PRE, lambda n: parts.append(str(n.value)))
    walker.register(Num, VisitPhase.POST, lambda n: None)
    walker.register(Add, VisitPhase.IN, lambda n: parts.append(" + "))
    walker.register(Mul, VisitPhase.IN, lambda n: parts.append(" * "))
    walker.register_fallback(VisitPhase.PRE, lambda n: parts.append("("))
    walker.register_fallback(VisitPhase.POST, lambda n: parts.append(")"))
    walker.walk(expr)
    return "".join(parts)


def evaluate(expr: Expr) -> int:
    """Evaluate an expression with a post-order walk over a value stack."""
    stack: List[int] = []

    def reduce(node: Expr, combine) -> None:
        operands = stack[len(stack) - len(node.operands) :]
        del stack[len(stack) - len(node.operands) :]
        result = operands[0]
        for operand in operands[1:]:
            result = combine(result, operand)
        stack.append(result)

    walker = ExprWalker(VisitPhase.POST)
    walker.register(Num, VisitPhase.POST, lambda n: stack.append(n.value))
    walker.register(Add, VisitPhase.POST, lambda n: reduce(n, lambda a, b: a + b))
    walker.register(Mul, VisitPhase.POST, lambda n: reduce(n, lambda a, b: a * b))
    walker.walk(expr)
    return stack.pop()


def main():
    expr = Add(Num(1), Mul(Num(2), Num(3), Num(4)), Num(5))

    print("Infix:   ", print_infix(expr))
    print("Value:   ", evaluate(expr))

    kinds = []
    describe = Visitor().register(Num, lambda n: kinds.append("number"))
    describe.register_fallback(lambda n: kinds.append(type(n).__name__.lower()))
    for node in (expr, expr.operands[0], expr.operands[1]):
        describe.accept(node)
    print("Kinds:   ", ", ".join(kinds))


if __name__ == "__main__":
    main()
