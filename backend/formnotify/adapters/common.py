from formnotify.schemas.event import ContactInfo

MISSING_TRANSLATION = "Missing Translation"
CONTACT_TITLE = "Contact Information"

CONTACT_LABELS = (
    ("first_name", "First Name"),
    ("last_name", "Last Name"),
    ("email", "Email"),
    ("company", "Company"),
    ("phone", "Phone"),
    ("details", "Details"),
)


def contact_entries(contact: ContactInfo | None) -> list[tuple[str, str]]:
    """Return (label, value) pairs for the filled in contact fields."""
    if contact is None:
        return []
    entries = []
    for field, label in CONTACT_LABELS:
        value = getattr(contact, field)
        if value:
            entries.append((label, value))
    return entries


def node_label(translation: str, default: str = MISSING_TRANSLATION) -> str:
    return translation or default
