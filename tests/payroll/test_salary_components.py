import pytest

from payroll_portal.core.exceptions import ValidationError
from payroll_portal.payroll.salary_components import components_from_gross


def test_components_from_gross():
    components = components_from_gross("17450")

    assert components.basic_salary == 10000.0
    assert components.house_rent == 5000.0
    assert (components.medical, components.transport, components.food) == (750, 450, 1250)
    assert components.total_salary == 17450.0
    assert components.ot_rate == 96.15


@pytest.mark.parametrize("gross", ["2450", "1000", "", "abc"])
def test_gross_must_exceed_fixed_allowances(gross):
    with pytest.raises(ValidationError):
        components_from_gross(gross)
