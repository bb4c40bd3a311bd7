import pytest

from palletchain.dispatch import Call, CallablePallet, CallDefinitionError, call
from palletchain.support import DispatchError


class Ledger(CallablePallet):
    def __init__(self):
        self.entries = []

    @call
    def record(self, caller, note):
        self.entries.append((caller, note))

    @call
    def clear(self, _caller):
        self.entries.clear()

    @call
    def reject(self, caller, reason):
        raise DispatchError(reason)

    @call
    def tagged(self, caller, *, tag):
        self.entries.append((caller, tag))

    def helper(self, caller):
        self.entries.append((caller, "helper"))


def test_base_pallet_has_no_calls():
    assert CallablePallet.calls() == {}


def test_calls_lists_decorated_methods_in_order():
    assert CallablePallet.calls() == {}
    assert Ledger.calls() == {
        "record": ("note",),
        "clear": (),
        "reject": ("reason",),
        "tagged": ("tag",),
    }


def test_calls_returns_a_copy():
    calls = Ledger.calls()
    calls["extra"] = ()
    assert "extra" not in Ledger.calls()
    base_calls = CallablePallet.calls()
    base_calls["extra"] = ()
    assert CallablePallet.calls() == {}


def test_dispatch_runs_the_call_with_caller():
    ledger = Ledger()
    ledger.dispatch("alice", Call("record", {"note": "hello"}))
    assert ledger.entries == [("alice", "hello")]


def test_dispatch_keyword_only_argument():
    ledger = Ledger()
    ledger.dispatch("bob", Call("tagged", {"tag": "x"}))
    assert ledger.entries == [("bob", "x")]


def test_dispatch_call_without_arguments():
    ledger = Ledger()
    ledger.dispatch("alice", Call("record", {"note": "a"}))
    ledger.dispatch("alice", Call("clear"))
    assert ledger.entries == []


def test_dispatch_propagates_call_error():
    ledger = Ledger()
    with pytest.raises(DispatchError, match="nope"):
        ledger.dispatch("alice", Call("reject", {"reason": "nope"}))


def test_dispatch_rejects_non_call_method():
    ledger = Ledger()
    with pytest.raises(DispatchError, match="helper"):
        ledger.dispatch("alice", Call("helper"))
    assert ledger.entries == []


def test_dispatch_rejects_unknown_name():
    ledger = Ledger()
    with pytest.raises(DispatchError, match="missing_fn"):
        ledger.dispatch("alice", Call("missing_fn"))


def test_dispatch_rejects_missing_argument():
    ledger = Ledger()
    with pytest.raises(DispatchError, match="record"):
        ledger.dispatch("alice", Call("record"))
    assert ledger.entries == []


def test_dispatch_rejects_extra_argument():
    ledger = Ledger()
    with pytest.raises(DispatchError, match="record"):
        ledger.dispatch("alice", Call("record", {"note": "a", "more": 1}))
    assert ledger.entries == []


def test_call_copies_its_arguments():
    args = {"note": "first"}
    request = Call("record", args)
    args["note"] = "second"
    assert request.args == {"note": "first"}


def test_call_equality():
    assert Call("record", {"note": "a"}) == Call("record", {"note": "a"})
    assert Call("record", {"note": "a"}) != Call("record", {"note": "b"})


def test_subclass_inherits_calls():
    class Extended(Ledger):
        @call
        def annotate(self, caller, text):
            self.entries.append((caller, text))

    assert "record" in Extended.calls()
    assert Extended.calls()["annotate"] == ("text",)
    ledger = Extended()
    ledger.dispatch("carol", Call("record", {"note": "n"}))
    ledger.dispatch("carol", Call("annotate", {"text": "t"}))
    assert ledger.entries == [("carol", "n"), ("carol", "t")]


def test_override_without_decorator_removes_call():
    class Restricted(Ledger):
        def clear(self, caller):
            pass

    assert "clear" not in Restricted.calls()
    with pytest.raises(DispatchError, match="clear"):
        Restricted().dispatch("alice", Call("clear"))


def test_first_parameter_must_be_self():
    def bad(caller, amount):
        pass

    with pytest.raises(CallDefinitionError, match="first argument"):
        call(bad)


def test_function_without_any_parameter_is_rejected():
    def bad():
        pass

    with pytest.raises(CallDefinitionError, match="first argument"):
        call(bad)


def test_second_parameter_must_exist():
    def bad(self):
        pass

    with pytest.raises(CallDefinitionError, match="second argument"):
        call(bad)


def test_second_parameter_must_be_named_caller():
    def bad(self, who, amount):
        pass

    with pytest.raises(CallDefinitionError, match="second parameter"):
        call(bad)


def test_second_parameter_must_be_positional():
    def bad(self, *, caller):
        pass

    with pytest.raises(CallDefinitionError, match="second argument"):
        call(bad)


def _with_varargs(self, caller, *rest):
    pass


def _with_varkw(self, caller, **rest):
    pass


@pytest.mark.parametrize("func", [_with_varargs, _with_varkw])
def test_variadic_arguments_are_rejected(func):
    with pytest.raises(CallDefinitionError, match="named parameter"):
        call(func)


def test_default_values_are_rejected():
    def bad(self, caller, amount=1):
        pass

    with pytest.raises(CallDefinitionError, match="default"):
        call(bad)


def test_keyword_only_default_values_are_rejected():
    def bad(self, caller, *, amount=1):
        pass

    with pytest.raises(CallDefinitionError, match="default"):
        call(bad)


def test_non_function_is_rejected():
    with pytest.raises(CallDefinitionError, match="plain function"):
        call(staticmethod(lambda caller: None))


def test_decorator_returns_the_same_function():
    def record(self, caller, note):
        return (caller, note)

    assert call(record) is record
    assert record(None, "alice", "n") == ("alice", "n")