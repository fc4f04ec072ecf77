"""Registry of special forms for the Schemer evaluator.

Maps Atoms to handler functions that implement non-standard evaluation rules.
The evaluator consults this table to dispatch special forms before ordinary
procedure application.
"""

from schemer.types.atom import Atom
from schemer.evaluation.special_forms.quote_form import quote_form
from schemer.evaluation.special_forms.if_form import if_form
from schemer.evaluation.special_forms.set_form import set_form
from schemer.evaluation.special_forms.define_form import define_form
from schemer.evaluation.special_forms.lambda_form import lambda_form
from schemer.evaluation.special_forms.load_form import load_form

SPECIAL_FORMS = {
    Atom("quote"): quote_form,
    Atom("if"): if_form,
    Atom("set!"): set_form,
    Atom("define"): define_form,
    Atom("lambda"): lambda_form,
    Atom("load"): load_form,
}
