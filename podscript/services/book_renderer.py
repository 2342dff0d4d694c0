"""
Book rendering.

Builds a plain-text or standalone HTML book from chapter text. Chapter
content is inserted as supplied; in HTML it is treated as markup.
"""

from typing import List, Optional

from ..models.book import Chapter
from ..utils import escape_html

SUPPORTED_FORMATS = ("txt", "html")

TITLE_RULE = "=" * 60
CHAPTER_RULE = "-" * 40

HTML_STYLE = """\
    @page { margin: 1in; }
    body { font-family: 'Cormorant Garamond', Georgia, serif; line-height: 1.8; max-width: 700px; margin: 0 auto; padding: 2rem; color: #1a1612; }
    .title-page { text-align: center; page-break-after: always; padding: 4rem 0; }
    h1 { font-size: 2.5rem; margin-bottom: 0.5rem; }
    .subtitle { font-size: 1.2rem; color: #8b7355; margin-bottom: 2rem; }
    .author { font-style: italic; font-size: 1.3rem; }
    .ornament { font-size: 1.5rem; margin: 2rem 0; color: #c4563a; }
    .chapter { page-break-before: always; margin-bottom: 3rem; }
    .chapter-number { font-size: 0.9rem; text-transform: uppercase; letter-spacing: 0.2em; color: #c4563a; margin-bottom: 0.5rem; }
    .chapter-title { font-size: 1.8rem; font-weight: 600; margin-bottom: 1.5rem; }
    .chapter-date { font-size: 0.9rem; color: #8b7355; margin-bottom: 1rem; }
    p { margin-bottom: 1rem; text-indent: 1.5em; text-align: justify; }
    p:first-of-type { text-indent: 0; }"""

FONT_LINK = (
    "https://fonts.googleapis.com/css2?family=Cormorant+Garamond:"
    "ital,wght@0,400;0,500;0,600&display=swap"
)


class UnsupportedFormatError(ValueError):
    pass


def _chapter_title(chapter: Chapter, number: int) -> str:
    return chapter.title or f"Chapter {number}"


def generate_text_book(
    title: Optional[str],
    subtitle: Optional[str],
    author: Optional[str],
    chapters: List[Chapter],
) -> str:
    lines = [TITLE_RULE, (title or "Untitled").upper()]
    if subtitle:
        lines.append(subtitle)
    lines += ["", f"By {author or 'Unknown Author'}", TITLE_RULE, ""]
    text = "\n".join(lines) + "\n"

    for number, chapter in enumerate(chapters, start=1):
        text += f"\n{CHAPTER_RULE}\n"
        text += f"CHAPTER {number}: {_chapter_title(chapter, number)}\n"
        if chapter.date:
            text += f"{chapter.date}\n"
        text += f"{CHAPTER_RULE}\n\n"
        text += f"{chapter.content or ''}\n\n"
    return text


def _html_chapter(chapter: Chapter, number: int) -> str:
    date = f'<p class="chapter-date">{escape_html(chapter.date)}</p>' if chapter.date else ""
    return f"""
    <div class="chapter">
      <div class="chapter-number">Chapter {number}</div>
      <h2 class="chapter-title">{escape_html(_chapter_title(chapter, number))}</h2>
      {date}
      <div class="chapter-content">{chapter.content or ""}</div>
    </div>
  """


def generate_html_book(
    title: Optional[str],
    subtitle: Optional[str],
    author: Optional[str],
    chapters: List[Chapter],
) -> str:
    safe_title = escape_html(title or "Untitled")
    body = "".join(_html_chapter(ch, n) for n, ch in enumerate(chapters, start=1))
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <title>{safe_title}</title>
  <link href="{FONT_LINK}" rel="stylesheet">
  <style>
{HTML_STYLE}
  </style>
</head>
<body>
  <div class="title-page">
    <h1>{safe_title}</h1>
    <p class="subtitle">{escape_html(subtitle)}</p>
    <div class="ornament">❧</div>
    <p class="author">{escape_html(author)}</p>
  </div>
  {body}
</body>
</html>"""


def render_book(
    fmt: Optional[str],
    title: Optional[str],
    subtitle: Optional[str],
    author: Optional[str],
    chapters: List[Chapter],
) -> str:
    """Render in `fmt` (one of SUPPORTED_FORMATS); raises UnsupportedFormatError otherwise."""
    if fmt not in SUPPORTED_FORMATS:
        raise UnsupportedFormatError("Unsupported format. Use 'txt' or 'html'")
    if fmt == "txt":
        return generate_text_book(title, subtitle, author, chapters)
    return generate_html_book(title, subtitle, author, chapters)
