from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Tuple

from .csv_writer import write_products_to_csv
from .excel_writer import write_products_to_excel
from .extract import extract_products
from .loader import read_html
from .logger import setup_logging
from .types import ALDI, TESCO, Product, RetailerProfile


logger = logging.getLogger(__name__)

MESSAGES = {
    "en": {
        "created": "Created {count} products to {path}",
        "appended": "Appended {count} products to {path}",
        "xlsx": "Excel copy: {path}",
        "xlsx_error": "Error: rows were appended to {csv_path}, but the Excel copy {path} failed: {error}",
        "error": "Error: {error}",
        "interrupted": "Interrupted by user",
        "help_desc": "Convert a saved {retailer} product-listing page into rows of the shared products CSV.",
        "help_input": "Path to the saved HTML page",
        "help_out_optional": "CSV file to create or append to (default {default})",
        "help_out_required": "CSV file to create or append to",
        "help_xlsx": "Also append the rows to this Excel workbook",
        "help_verbose": "Log diagnostics, including skipped listings, to stderr",
        "help_lang": "Messages language: en or ru (default en)",
    },
    "ru": {
        "created": "Создан файл {path}, записано товаров: {count}",
        "appended": "Дописано в {path} товаров: {count}",
        "xlsx": "Копия в Excel: {path}",
        "xlsx_error": "Ошибка: строки дописаны в {csv_path}, но копию в Excel {path} записать не удалось: {error}",
        "error": "Ошибка: {error}",
        "interrupted": "Прервано пользователем",
        "help_desc": "Преобразование сохранённой страницы каталога {retailer} в строки общего CSV товаров.",
        "help_input": "Путь к сохранённой HTML-странице",
        "help_out_optional": "CSV-файл для создания или дозаписи (по умолчанию {default})",
        "help_out_required": "CSV-файл для создания или дозаписи",
        "help_xlsx": "Дополнительно дописать строки в эту книгу Excel",
        "help_verbose": "Выводить диагностику, включая пропущенные карточки, в stderr",
        "help_lang": "Язык сообщений: en или ru (по умолчанию en)",
    },
}


def _msg(lang: str, key: str, **kwargs) -> str:
    lang_key = lang if lang in MESSAGES else "en"
    template = MESSAGES[lang_key].get(key, "")
    return template.format(**kwargs)


class _ArgumentParser(argparse.ArgumentParser):
    # Usage errors exit with 1, same as every other failure
    def error(self, message: str) -> None:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def convert(
    profile: RetailerProfile,
    source: str,
    out_path: str,
) -> Tuple[List[Product], bool]:
    """Read one listing page and append its products to ``out_path``.

    Returns the extracted products and whether the CSV file was created.
    """
    html = read_html(source)
    products = extract_products(profile, html)
    created = write_products_to_csv(products, out_path)
    return products, created


def _build_arg_parser(profile: RetailerProfile, lang: str = "en") -> argparse.ArgumentParser:
    loc = MESSAGES.get(lang, MESSAGES["en"])
    p = _ArgumentParser(
        prog=f"{profile.key}-to-csv",
        description=loc["help_desc"].format(retailer=profile.display_name),
    )
    p.add_argument("source", help=loc["help_input"])
    if profile.default_output:
        p.add_argument(
            "out_path",
            nargs="?",
            default=profile.default_output,
            help=loc["help_out_optional"].format(default=profile.default_output),
        )
    else:
        p.add_argument("out_path", help=loc["help_out_required"])
    p.add_argument(
        "--xlsx",
        dest="xlsx_path",
        default=None,
        help=loc["help_xlsx"],
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help=loc["help_verbose"],
    )
    p.add_argument(
        "--lang",
        dest="lang",
        choices=["en", "ru"],
        default=lang,
        help=loc["help_lang"],
    )
    return p


def run(profile: RetailerProfile, argv: Optional[list[str]] = None) -> int:
    parser = _build_arg_parser(profile)
    args = parser.parse_args(argv)
    lang = args.lang
    setup_logging(args.verbose)
    try:
        products, created = convert(
            profile,
            source=args.source,
            out_path=args.out_path,
        )
    except KeyboardInterrupt:
        print(_msg(lang, "interrupted"), file=sys.stderr)
        return 130
    except Exception as exc:
        logger.debug("Conversion failed", exc_info=True)
        print(_msg(lang, "error", error=exc), file=sys.stderr)
        return 1

    print(_msg(lang, "created" if created else "appended", count=len(products), path=args.out_path))
    if args.xlsx_path:
        # The CSV append above is already on disk; say so when only the copy fails
        try:
            write_products_to_excel(products, args.xlsx_path)
        except Exception as exc:
            logger.debug("Excel copy failed", exc_info=True)
            print(_msg(lang, "xlsx_error", path=args.xlsx_path, csv_path=args.out_path, error=exc), file=sys.stderr)
            return 1
        print(_msg(lang, "xlsx", path=args.xlsx_path))
    return 0


def main_aldi(argv: Optional[list[str]] = None) -> int:
    return run(ALDI, argv)


def main_tesco(argv: Optional[list[str]] = None) -> int:
    return run(TESCO, argv)
