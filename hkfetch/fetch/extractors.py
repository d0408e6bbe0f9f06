"""
Table extraction for the two result pages.

Both pages publish results as plain HTML tables. Each extractor narrows the
document down to the region holding the table, walks its rows in document
order and keeps the columns carrying the date and the drawn number. Markup
that does not match simply produces fewer rows.
"""

from bs4 import BeautifulSoup, Tag
from typing import List
from hkfetch.schemas import ResultEntry

# Decorative rows on the lotto page carry this class and span all four columns
BANNER_MARKER = "Keluaran_Banner_Body"
BANNER_COLSPAN = "4"


def row_cells(row: Tag) -> List[str]:
    """Text of each cell in a row with embedded tags stripped and whitespace trimmed"""
    return [td.get_text().strip() for td in row.find_all("td", recursive=False)]


def is_banner_row(row: Tag) -> bool:
    inner = row.decode_contents()
    if BANNER_MARKER in inner:
        return True
    return row.find(attrs={"colspan": BANNER_COLSPAN}) is not None


def extract_hk_pools(html: str) -> List[ResultEntry]:
    """
    Extract HK Pools results from tabelsemalam.com.

    The table lives inside div#all; every row with a date in the first cell
    and the number in the second becomes an entry.
    """
    soup = BeautifulSoup(html, "html.parser")
    container = soup.select_one('div[id="all" i]')
    if container is None:
        print("Could not find div#all")
        return []

    entries: List[ResultEntry] = []
    for row in container.find_all("tr"):
        cells = row_cells(row)
        if len(cells) >= 2 and cells[0] and cells[1]:
            entries.append(ResultEntry(date=cells[0], result=cells[1]))
    return entries


def extract_hk_lotto(html: str) -> List[ResultEntry]:
    """
    Extract HK Lotto results from masterlive.net.

    Rows are read from table.TableKeluaran. The date (TANGGAL) is the
    second cell and the number (NOMOR) the fourth. Banner rows are skipped.
    """
    soup = BeautifulSoup(html, "html.parser")
    table = soup.select_one('table[class*="TableKeluaran" i]')
    if table is None:
        print("Could not find table.TableKeluaran")
        return []

    entries: List[ResultEntry] = []
    for row in table.find_all("tr"):
        if is_banner_row(row):
            continue
        cells = row_cells(row)
        if len(cells) >= 4 and cells[1] and cells[3]:
            entries.append(ResultEntry(date=cells[1], result=cells[3]))
    return entries
