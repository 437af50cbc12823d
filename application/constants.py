"""Application-level constants."""

# Page wrapper used when writing a standalone HTML file
HTML_DOCUMENT_TEMPLATE = (
    "<!DOCTYPE html>\n"
    '<html lang="en"><head><meta charset="utf-8"><title>{title}</title></head>\n'
    "<body>{body}</body></html>\n"
)
