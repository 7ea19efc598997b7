from __future__ import annotations

import json
import random
from collections import Counter, defaultdict
from pathlib import Path

from app.agents.router import INTENTS, classify

CASES_PATH = Path(__file__).resolve().parents[1] / "tests" / "router_intent_cases.jsonl"


def main():
    cases = []
    with open(CASES_PATH, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            cases.append(json.loads(line))

    rng = random.Random(0)
    correct = 0
    total = 0
    confusion = defaultdict(Counter)
    misses = []

    for c in cases:
        pred = classify(c["text"], rng).intent
        expected = c["expected"]
        confusion[expected][pred] += 1
        total += 1
        if pred == expected:
            correct += 1
        else:
            misses.append((c["text"], expected, pred))

    acc = correct / total if total else 0.0
    print(f"Cases: {total}")
    print(f"Accuracy: {acc:.2%}")

    width = max(len(i) for i in INTENTS) + 2
    print("\nConfusion matrix:")
    print("expected\\pred".ljust(width) + "".join(i[:8].ljust(10) for i in INTENTS))
    for e in INTENTS:
        row = e.ljust(width)
        for p in INTENTS:
            row += str(confusion[e][p]).ljust(10)
        print(row)

    if misses:
        print("\nMisrouted:")
        for text, expected, pred in misses:
            print(f"- {text!r}: expected {expected}, got {pred}")


if __name__ == "__main__":
    main()
