import argparse
import os

from quiz_bank.bank import default_bank
from quiz_bank.parsing import save_question_bank_json


BANK_JSON = "output/question_bank.json"


def main():
    parser = argparse.ArgumentParser(description="Export the built-in quiz question bank to JSON")
    parser.add_argument("--output", default=BANK_JSON, help="Where to write the JSON file")
    parser.add_argument(
        "--no-answers",
        action="store_true",
        help="Leave out correctAnswer (client-safe copy)",
    )
    args = parser.parse_args()

    bank = default_bank()
    n_questions = sum(len(p.questions) for p in bank)
    print(f"Built question bank with {len(bank)} pages and {n_questions} questions.")

    os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
    save_question_bank_json(bank.pages, args.output, include_answers=not args.no_answers)


if __name__ == "__main__":
    main()
