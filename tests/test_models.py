import dataclasses

import pytest

from officer_service.models import CreateOfficerParams, Officer


def test_create_params_optional_fields_default_to_none():
    params = CreateOfficerParams(name="Ada", title="President")
    assert params.linkedin is None
    assert params.image_uri is None


def test_officer_fields_in_row_order():
    officer = Officer(*(7, "Ada", "President", "in/ada", "img.png"))
    assert dataclasses.astuple(officer) == (7, "Ada", "President", "in/ada", "img.png")


def test_officer_is_frozen():
    officer = Officer(id=1, name="Ada", title="President")
    with pytest.raises(dataclasses.FrozenInstanceError):
        officer.name = "Grace"
    assert officer.name == "Ada"


def test_officer_equality_by_value():
    a = Officer(id=1, name="Ada", title="President", linkedin="in/ada")
    b = Officer(id=1, name="Ada", title="President", linkedin="in/ada")
    assert a == b
    assert a != dataclasses.replace(b, title="Treasurer")


def test_params_round_trip_through_dict():
    params = CreateOfficerParams(name="Ada", title="President", image_uri="img.png")
    assert CreateOfficerParams(**dataclasses.asdict(params)) == params