"""CSV export of the item list."""
import csv
import io
from typing import Iterable

from inventory_catalog.schemas.item import Item

BOM = "\ufeff"

CSV_HEADER = [
    "المعرّف",
    "الاسم",
    "الموديل",
    "الباركود",
    "النوع",
    "الفئة",
    "المقاس",
    "اللون",
    "المادة",
    "بلد المنشأ",
    "السعر",
    "الوصف",
]


def format_price(price: float) -> str:
    return str(int(price)) if float(price).is_integer() else str(price)


def items_to_csv(items: Iterable[Item]) -> str:
    """Render items as CSV text, prefixed with a BOM so spreadsheets pick UTF-8."""
    output = io.StringIO()
    writer = csv.writer(output, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for item in items:
        writer.writerow([
            item.id,
            item.name,
            item.model,
            item.barcode,
            item.type,
            item.category,
            item.size,
            item.color,
            item.material,
            item.country,
            format_price(item.price),
            item.description,
        ])
    return BOM + output.getvalue()
