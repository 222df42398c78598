"""Registry of special forms for the littlelisp evaluator.

SpecialForm is the closed set of keywords with non-standard evaluation rules;
SPECIAL_FORMS maps each one to its handler. The evaluator consults this table
before ordinary function application.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from littlelisp.evaluation.special_forms.define_form import define_form
from littlelisp.evaluation.special_forms.if_form import if_form
from littlelisp.evaluation.special_forms.let_form import let_form
from littlelisp.evaluation.special_forms.lambda_form import lambda_form


class SpecialForm(Enum):
    DEFINE = "define"
    IF = "if"
    LET = "let"
    LAMBDA = "lambda"

    @classmethod
    def lookup(cls, name: str) -> Optional[SpecialForm]:
        return _BY_NAME.get(name)


_BY_NAME = {form.value: form for form in SpecialForm}

SPECIAL_FORMS = {
    SpecialForm.DEFINE: define_form,
    SpecialForm.IF: if_form,
    SpecialForm.LET: let_form,
    SpecialForm.LAMBDA: lambda_form,
}
