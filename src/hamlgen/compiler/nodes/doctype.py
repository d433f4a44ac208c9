"""Document type declarations (``!!!``)."""

from hamlgen.compiler.nodes.base import Node
from hamlgen.compiler.nodes.text import strip_sigil
from hamlgen.compiler.options import Format

HTML5_DOCTYPE = "<!DOCTYPE html>"

XHTML_DOCTYPES = {
    "": '<!DOCTYPE html PUBLIC "-//W3C//DTD XHTML 1.0 Transitional//EN" '
    '"http://www.w3.org/TR/xhtml1/DTD/xhtml1-transitional.dtd">',
    "strict": '<!DOCTYPE html PUBLIC "-//W3C//DTD XHTML 1.0 Strict//EN" '
    '"http://www.w3.org/TR/xhtml1/DTD/xhtml1-strict.dtd">',
    "frameset": '<!DOCTYPE html PUBLIC "-//W3C//DTD XHTML 1.0 Frameset//EN" '
    '"http://www.w3.org/TR/xhtml1/DTD/xhtml1-frameset.dtd">',
    "5": HTML5_DOCTYPE,
    "1.1": '<!DOCTYPE html PUBLIC "-//W3C//DTD XHTML 1.1//EN" '
    '"http://www.w3.org/TR/xhtml11/DTD/xhtml11.dtd">',
    "basic": '<!DOCTYPE html PUBLIC "-//W3C//DTD XHTML Basic 1.1//EN" '
    '"http://www.w3.org/TR/xhtml-basic/xhtml-basic11.dtd">',
    "mobile": '<!DOCTYPE html PUBLIC "-//WAPFORUM//DTD XHTML Mobile 1.2//EN" '
    '"http://www.openmobilealliance.org/tech/DTD/xhtml-mobile12.dtd">',
}

HTML4_DOCTYPES = {
    "": '<!DOCTYPE html PUBLIC "-//W3C//DTD HTML 4.01 Transitional//EN" '
    '"http://www.w3.org/TR/html4/loose.dtd">',
    "strict": '<!DOCTYPE html PUBLIC "-//W3C//DTD HTML 4.01//EN" '
    '"http://www.w3.org/TR/html4/strict.dtd">',
    "frameset": '<!DOCTYPE html PUBLIC "-//W3C//DTD HTML 4.01 Frameset//EN" '
    '"http://www.w3.org/TR/html4/frameset.dtd">',
    "5": HTML5_DOCTYPE,
}


class DoctypeNode(Node):
    """A doctype chosen by the declared kind and the output format.

    Unknown kinds fall back to the format's default doctype. ``XML`` emits
    an XML prolog in XHTML and nothing otherwise.
    """

    type_name = "doctype"
    accepts_children = False

    def evaluate(self) -> None:
        kind, _, rest = strip_sigil(self.expression, ("!!!",)).partition(" ")
        kind = kind.lower()

        if kind == "xml":
            if self.format.is_xhtml:
                encoding = rest.strip() or "utf-8"
                self.opener = f"<?xml version='1.0' encoding='{encoding}' ?>"
            return

        if self.format is Format.HTML5:
            self.opener = HTML5_DOCTYPE
        elif self.format is Format.HTML4:
            self.opener = HTML4_DOCTYPES.get(kind, HTML4_DOCTYPES[""])
        else:
            self.opener = XHTML_DOCTYPES.get(kind, XHTML_DOCTYPES[""])
