# scripts/load_quotes.py
import sys
import json
import argparse
from sqlmodel import Session
from qod.database import create_db_and_tables, engine
from qod.quote_loader import QuoteFileError, load_quotes, parse_quote_document
from qod.repositories.quote_repository import QuoteRepository
from qod.repositories.source_repository import SourceRepository


def main():
    # Set up argument parser
    parser = argparse.ArgumentParser(
        description="Load quotes and their sources from a JSON file into the database."
    )
    parser.add_argument("file_path", help="Path to the JSON quote file")
    args = parser.parse_args()

    # Read the file
    try:
        with open(args.file_path, "r", encoding="utf-8") as file:
            content = file.read()
    except OSError as e:
        print(json.dumps({"error": f"Error reading file: {e}"}, indent=2))
        sys.exit(1)

    # Parse and store the quotes
    try:
        entries = parse_quote_document(content)
    except QuoteFileError as e:
        print(json.dumps({"error": str(e)}, ensure_ascii=False, indent=2))
        sys.exit(1)

    create_db_and_tables()
    with Session(engine) as session:
        summary = load_quotes(
            entries, QuoteRepository(session), SourceRepository(session)
        )
    print(json.dumps(summary.to_dict(), indent=2))


if __name__ == "__main__":
    main()
