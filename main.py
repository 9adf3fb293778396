import argparse
import logging
import os
import sys
from typing import Optional

import pandas as pd

from sms_txn_parser import parse_bank_message
from sms_txn_parser.config import config
from sms_txn_parser.logging_config import setup_logging

logger = logging.getLogger("sms_txn_parser.batch")

MESSAGE_COLUMNS = ["body", "message", "text", "sms"]
PARSED_COLUMNS = ["parsed_amount", "parsed_type", "parsed_category", "parsed_description"]


def find_message_column(df: pd.DataFrame, preferred: Optional[str] = None) -> Optional[str]:
    if preferred and preferred in df.columns:
        return preferred
    for col in df.columns:
        if str(col).lower() in MESSAGE_COLUMNS:
            return col
    return None


def parse_row(text) -> pd.Series:
    # Empty cells come through as NaN
    parsed = parse_bank_message(text if isinstance(text, str) else "")
    return pd.Series(
        [
            float(parsed.amount) if parsed.amount is not None else None,
            parsed.type.value,
            parsed.category.value,
            parsed.description,
        ],
        index=PARSED_COLUMNS,
    )


def process_sms_df(df: pd.DataFrame, msg_col: Optional[str] = None) -> pd.DataFrame:
    """
    Adds parsed transaction columns to a dataframe of SMS messages.
    """
    df = df.copy()

    column = find_message_column(df, msg_col)
    if column is None:
        raise ValueError(f"Could not find SMS body column in {list(df.columns)}")

    logger.info(f"Parsing {len(df)} messages from column '{column}'")
    if df.empty:
        for name in PARSED_COLUMNS:
            df[name] = pd.Series(dtype=object)
        return df

    df[PARSED_COLUMNS] = df[column].apply(parse_row)
    return df


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Parse bank SMS messages from a CSV file")
    parser.add_argument("--input", type=str, required=True, help="Input SMS CSV file path")
    parser.add_argument("--output", type=str, default=None, help="Output CSV path")
    parser.add_argument("--column", type=str, default=config.MESSAGE_COLUMN, help="Message body column")
    parser.add_argument("--log-level", type=str, default=None, help="Logging level")
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    input_path = os.path.abspath(args.input)
    if not os.path.exists(input_path):
        logger.error(f"File {input_path} not found.")
        return 1

    if args.output:
        output_path = os.path.abspath(args.output)
    else:
        root, _ = os.path.splitext(input_path)
        output_path = f"{root}_parsed.csv"

    df_raw = pd.read_csv(input_path, low_memory=False)
    try:
        df_parsed = process_sms_df(df_raw, args.column)
    except ValueError as e:
        logger.error(str(e))
        return 1

    df_parsed.to_csv(output_path, index=False)

    with_amount = int(df_parsed["parsed_amount"].notna().sum()) if not df_parsed.empty else 0
    logger.info(f"Parsing complete. Processed {len(df_parsed)} messages, {with_amount} with an amount.")
    logger.info(f"Output saved to {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
