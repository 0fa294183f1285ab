"""
XML request documents for the eFax outbound API.

Two document shapes are produced: OutboundRequest (fax submission) and
OutboundStatus (delivery status query). Leaf text is escaped by the
ElementTree serializer, so callers pass raw strings.
"""

import base64
import re
from xml.etree import ElementTree as ET

from efax.config import Credentials
from efax.models import (
    DEFAULT_CONTENT_TYPE,
    PRIORITY,
    RESOLUTION,
    SELF_BUSY,
    Disposition,
    EmailDisposition,
    FaxJob,
    PostDisposition,
)

XML_DECLARATION = '<?xml version="1.0"?>'
INDENT = "  "

# Code points outside the XML 1.0 Char production; replaced with "*".
INVALID_XML_CHARS = re.compile("[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")
INVALID_XML_REPLACEMENT = "*"


def sanitize_text(text: str) -> str:
    return INVALID_XML_CHARS.sub(INVALID_XML_REPLACEMENT, text)


def _leaf(parent: ET.Element, tag: str, text: str | None) -> ET.Element:
    element = ET.SubElement(parent, tag)
    element.text = "" if text is None else sanitize_text(str(text))
    return element


def _access_control(root: ET.Element, credentials: Credentials) -> None:
    access = ET.SubElement(root, "AccessControl")
    _leaf(access, "UserName", credentials.username)
    _leaf(access, "Password", credentials.password)


def _serialize(root: ET.Element) -> str:
    ET.indent(root, space=INDENT)
    return f"{XML_DECLARATION}\n{ET.tostring(root, encoding='unicode')}\n"


def encode_file_contents(content: bytes) -> str:
    """Base64 encode file content on a single line.

    The service rejects multi-line base64, so encodebytes() is not usable here.
    """
    return base64.b64encode(content).decode("ascii")


def _disposition(control: ET.Element, disposition: Disposition) -> None:
    if isinstance(disposition, PostDisposition):
        _leaf(control, "DispositionURL", disposition.url)
        _leaf(control, "DispositionLevel", disposition.level.value)
        _leaf(control, "DispositionMethod", disposition.method.value)
    elif isinstance(disposition, EmailDisposition):
        _leaf(control, "DispositionMethod", disposition.method.value)
        emails = ET.SubElement(control, "DispositionEmails")
        email = ET.SubElement(emails, "DispositionEmail")
        _leaf(email, "DispositionLevel", disposition.level.value)
        if disposition.recipient:
            _leaf(email, "DispositionRecipient", disposition.recipient)
        if disposition.address:
            _leaf(email, "DispositionAddress", disposition.address)
    else:
        raise TypeError(f"Unsupported disposition: {type(disposition).__name__}")


def build_outbound_request(credentials: Credentials, job: FaxJob) -> str:
    """Build the OutboundRequest document submitting ``job``."""
    root = ET.Element("OutboundRequest")
    _access_control(root, credentials)

    transmission = ET.SubElement(root, "Transmission")

    control = ET.SubElement(transmission, "TransmissionControl")
    if job.transmission_id:
        _leaf(control, "TransmissionID", job.transmission_id)
    _leaf(control, "Resolution", RESOLUTION)
    _leaf(control, "Priority", PRIORITY)
    _leaf(control, "SelfBusy", SELF_BUSY)
    _leaf(control, "FaxHeader", job.subject)

    disposition_control = ET.SubElement(transmission, "DispositionControl")
    if job.disposition is not None:
        _disposition(disposition_control, job.disposition)

    recipient = ET.SubElement(ET.SubElement(transmission, "Recipients"), "Recipient")
    _leaf(recipient, "RecipientName", job.name)
    _leaf(recipient, "RecipientCompany", job.company)
    _leaf(recipient, "RecipientFax", job.fax_number)

    file_element = ET.SubElement(ET.SubElement(transmission, "Files"), "File")
    _leaf(file_element, "FileContents", encode_file_contents(job.content_bytes))
    _leaf(file_element, "FileType", job.content_type or DEFAULT_CONTENT_TYPE)

    return _serialize(root)


def build_outbound_status(credentials: Credentials, doc_id: str) -> str:
    """Build the OutboundStatus document querying ``doc_id``."""
    root = ET.Element("OutboundStatus")
    _access_control(root, credentials)

    transmission = ET.SubElement(root, "Transmission")
    control = ET.SubElement(transmission, "TransmissionControl")
    _leaf(control, "DOCID", doc_id)

    return _serialize(root)
