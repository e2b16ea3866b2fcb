#!/usr/bin/env python
import argparse
import json
import sys
from collections import defaultdict
from pathlib import Path

from quiz_bank.bank import QuestionBank
from quiz_bank.errors import SchemaValidationError
from quiz_bank.parsing import load_question_bank_json


def find_duplicate_prompts(bank: QuestionBank) -> dict[str, list[str]]:
    """
    Map prompt text -> ["pg1/all_same", ...] for every prompt used by more
    than one question. Comparison ignores case and surrounding whitespace.
    """
    locations = defaultdict(list)
    for page in bank:
        for q in page.questions:
            locations[q.question.strip().lower()].append(f"{page.id}/{q.id}")

    return {prompt: locs for prompt, locs in locations.items() if len(locs) > 1}


def main():
    parser = argparse.ArgumentParser(description="Validate a quiz question bank JSON file")
    parser.add_argument("bank_json", help="Path to question_bank.json")
    args = parser.parse_args()

    try:
        bank = QuestionBank(load_question_bank_json(args.bank_json))
    except (SchemaValidationError, json.JSONDecodeError, OSError) as e:
        print(f"Invalid question bank: {e}")
        sys.exit(1)

    n_questions = sum(len(p.questions) for p in bank)
    n_multi = sum(1 for p in bank for q in p.questions if q.multi_select)

    print(f"Bank file: {Path(args.bank_json).name}")
    print(f"Pages     : {len(bank)}")
    print(f"Questions : {n_questions} ({n_multi} multi-select)")

    duplicates = find_duplicate_prompts(bank)
    if not duplicates:
        print("\nNo duplicate prompts found")
        return

    print("\n=== Duplicated prompts ===")
    for prompt in sorted(duplicates):
        print(f"\n- {prompt}")
        print(f"  Used by : {', '.join(duplicates[prompt])}")


if __name__ == "__main__":
    main()
