from employee_api.employees.model import NOT_FOUND, Employee, Found, NotFound


def test_from_json_reads_camel_case_fields():
    e = Employee.from_json({"firstName": "Ann", "lastName": "Lee", "email": "ann@x.com", "role": "Engineer"})

    assert e == Employee(employee_id=None, first_name="Ann", last_name="Lee", email="ann@x.com", role="Engineer")


def test_to_json_shape():
    e = Employee(employee_id=7, first_name="Ann", last_name="Lee", email="ann@x.com", role="Engineer")

    assert e.to_json() == {"id": 7, "firstName": "Ann", "lastName": "Lee", "email": "ann@x.com", "role": "Engineer"}


def test_missing_fields_become_none():
    e = Employee.from_json({"firstName": "Ann"})

    assert e.employee_id is None
    assert e.last_name is None and e.email is None and e.role is None


def test_with_fields_keeps_id_and_replaces_the_rest():
    existing = Employee(employee_id=3, first_name="A", last_name="B", email="a@b", role="Dev")
    incoming = Employee(employee_id=99, first_name="C", last_name="D", email="c@d", role="Lead")

    merged = existing.with_fields(incoming)

    assert merged == Employee(employee_id=3, first_name="C", last_name="D", email="c@d", role="Lead")


def test_lookup_results():
    e = Employee(employee_id=1, first_name="A", last_name="B", email="a@b", role="Dev")

    assert Found(e)
    assert not NOT_FOUND
    assert NotFound() is NOT_FOUND
