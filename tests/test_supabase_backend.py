from datetime import date

from postgrest.exceptions import APIError

from nutriapp.gateway import AuthSession
from nutriapp.gateway.backends.base import TextSearch, eq, gte, neq
from nutriapp.gateway.backends.supabase_backend import SupabaseBackend, build_or_filter, quote_filter_value
from nutriapp.gateway.registry import build_gateways


class FakeResponse:
    def __init__(self, data):
        self.data = data


class FakeQuery:
    """Records the PostgREST builder chain and replays a canned result."""

    def __init__(self, client, table):
        self.client = client
        self.table = table
        self.calls = []

    def __getattr__(self, name):
        def method(*args, **kwargs):
            self.calls.append((name, args, kwargs))
            return self
        return method

    @property
    def not_(self):
        self.calls.append(("not_", (), {}))
        return self

    def execute(self):
        self.client.executed.append(self)
        outcome = self.client.outcomes.pop(0) if self.client.outcomes else []
        if isinstance(outcome, Exception):
            raise outcome
        return FakeResponse(outcome)


class FakeClient:
    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.executed = []

    def table(self, name):
        return FakeQuery(self, name)


def test_quote_filter_value():
    assert quote_filter_value("a,b") == '"a,b"'
    assert quote_filter_value('say "hi"') == '"say \\"hi\\""'


def test_or_filter_escapes_like_metacharacters():
    search = TextSearch(("full_name", "email"), "50%_off")
    assert build_or_filter(search) == (
        'full_name.ilike."%50\\\\%\\\\_off%",email.ilike."%50\\\\%\\\\_off%"'
    )
    # a literal star must not reach PostgREST, which reads it as a wildcard run
    assert build_or_filter(TextSearch(("full_name",), "a*b")) == 'full_name.ilike."%a_b%"'


def test_select_builds_filters_order_and_limit():
    client = FakeClient([{"id": "p1"}])
    backend = SupabaseBackend(client)
    result = backend.select(
        "patients",
        filters=[eq("nutritionist_id", "n1"), eq("deleted_at", None), neq("id", "x"), gte("date", date(2024, 1, 2))],
        order=[("date", True), ("time", False)],
        limit=5,
    )
    assert result.is_ok and result.value == [{"id": "p1"}]

    calls = client.executed[0].calls
    assert ("select", ("*",), {}) in calls
    assert ("eq", ("nutritionist_id", "n1"), {}) in calls
    assert ("is_", ("deleted_at", "null"), {}) in calls
    assert ("neq", ("id", "x"), {}) in calls
    assert ("gte", ("date", "2024-01-02"), {}) in calls
    assert ("order", ("date",), {"desc": False}) in calls
    assert ("order", ("time",), {"desc": True}) in calls
    assert ("limit", (5,), {}) in calls


def test_single_select_on_empty_result_is_row_not_found():
    backend = SupabaseBackend(FakeClient([]))
    result = backend.select("patients", filters=[eq("id", "missing")], single=True)
    assert not result.is_ok
    assert result.code == "PGRST116"


def test_api_error_is_returned_not_raised():
    error = APIError({"message": "duplicate key value", "code": "23505", "details": "Key (email)", "hint": None})
    backend = SupabaseBackend(FakeClient(error))
    result = backend.insert("nutritionists", {"email": "a@example.com"})
    assert not result.is_ok
    assert result.code == "23505"
    assert result.details == "Key (email)"


def test_insert_serializes_dates():
    client = FakeClient([{"id": "a1", "date": "2024-05-01"}])
    backend = SupabaseBackend(client)
    result = backend.insert("appointments", {"id": "a1", "date": date(2024, 5, 1)})
    assert result.is_ok and result.value["id"] == "a1"
    assert ("insert", ({"id": "a1", "date": "2024-05-01"},), {}) in client.executed[0].calls


def test_delete_returns_count():
    backend = SupabaseBackend(FakeClient([{"id": "a"}, {"id": "b"}]))
    result = backend.delete("appointments", [eq("patient_id", "p")])
    assert result.is_ok and result.value == 2


def test_gateway_over_supabase_maps_errors():
    session = AuthSession(user_id="n1")
    rls = APIError({"message": "new row violates row-level security policy", "code": "42501", "details": None, "hint": None})
    gateways = build_gateways(SupabaseBackend(FakeClient(rls)), multi_tenant=True, bmi_source="application")
    res = gateways["patients"].create(session, {"full_name": "Ana"})
    assert res.status == 403
    assert res.error.code == "42501"

    gateways = build_gateways(SupabaseBackend(FakeClient([])), multi_tenant=True, bmi_source="application")
    res = gateways["patients"].get_by_id(session, "missing")
    assert res.status == 404
    assert res.error.message == "Patient not found"


def test_search_goes_through_or_filter():
    client = FakeClient([])
    gateways = build_gateways(SupabaseBackend(client), multi_tenant=True, bmi_source="application")
    res = gateways["patients"].search(AuthSession(user_id="n1"), "100%")
    assert res.status == 200 and res.data == []
    calls = client.executed[0].calls
    or_calls = [c for c in calls if c[0] == "or_"]
    assert or_calls and "100\\\\%" in or_calls[0][1][0]
    assert ("eq", ("active", True), {}) in calls
