"""
Form payload assembly for the eFax outbound endpoint.

The XML document travels inside a URL-encoded form body:
``id=<account_id>&xml=<percent-encoded xml>&respond=XML``.
"""

from urllib.parse import quote

from efax.models import DispositionMethod, FaxJob

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
XML_CONTENT_TYPE = "text/xml"
STATUS_CONTENT_TYPE = XML_CONTENT_TYPE

# quote() never escapes letters, digits and "_.-~"; the remaining marks are
# the unreserved punctuation the service accepts unescaped.
UNRESERVED_MARKS = "!*'()"


def percent_encode(value: str) -> str:
    """Percent-encode every character outside the unreserved set."""
    return quote(value, safe=UNRESERVED_MARKS, encoding="utf-8")


def encode_params(account_id: str, xml: str) -> bytes:
    """Build the POST body carrying ``xml`` for ``account_id``."""
    body = f"id={percent_encode(account_id)}&xml={percent_encode(xml)}&respond=XML"
    return body.encode("ascii")


def content_type_for_submission(job: FaxJob) -> str:
    """POST dispositions need form semantics; everything else is sent as XML."""
    if job.disposition is not None and job.disposition.method == DispositionMethod.POST:
        return FORM_CONTENT_TYPE
    return XML_CONTENT_TYPE
