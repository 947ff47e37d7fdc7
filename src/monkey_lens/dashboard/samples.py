"""Sample Monkey programs offered by the dashboard."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CodeSample:
    id: str
    title: str
    code: str


SAMPLES: tuple[CodeSample, ...] = (
    CodeSample(
        id="fibonacci",
        title="Fibonacci Sequence",
        code="""let fibonacci = fn(x) {
  if (x == 0) {
    0
  } else {
    if (x == 1) {
      return 1;
    } else {
      fibonacci(x - 1) + fibonacci(x - 2);
    }
  }
};

fibonacci(10);""",
    ),
    CodeSample(
        id="factorial",
        title="Factorial Function",
        code="""let factorial = fn(n) {
  if (n < 2) {
    1
  } else {
    n * factorial(n - 1);
  }
};

factorial(5);""",
    ),
    CodeSample(
        id="closures",
        title="Closures",
        code="""let makeAdder = fn(x) {
  fn(y) { x + y }
};

let addTwo = makeAdder(2);
addTwo(3);""",
    ),
)


def get_sample(sample_id: str) -> CodeSample | None:
    return next((s for s in SAMPLES if s.id == sample_id), None)
