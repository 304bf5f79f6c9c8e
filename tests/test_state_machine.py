import pytest

from quadkit.coroutines import CoroutinesContext, wait_seconds
from quadkit.state_machine import MAX_STATE, State, StateMachine


class Owner:
    def __init__(self):
        self.log = []


def test_starts_in_state_zero():
    machine = StateMachine()
    assert machine.state() == 0


def test_state_change_applies_on_update():
    machine = StateMachine()
    owner = Owner()
    machine.set_state(3)
    assert machine.state() == 0
    machine.update(owner, 0.1)
    assert machine.state() == 3


def test_update_callback_receives_owner_and_dt():
    machine = StateMachine()
    owner = Owner()
    machine.add_state(0, State().with_update(lambda o, dt: o.log.append(dt)))
    machine.update(owner, 0.25)
    machine.update(owner, 0.5)
    assert owner.log == [0.25, 0.5]


def test_on_end_called_when_leaving():
    machine = StateMachine()
    owner = Owner()
    machine.add_state(0, State().with_on_end(lambda o: o.log.append("end0")))
    machine.add_state(1, State().with_update(lambda o, dt: o.log.append("upd1")))
    machine.set_state(1)
    machine.update(owner, 0.1)
    assert owner.log == ["end0", "upd1"]


def test_on_end_not_called_for_same_state():
    machine = StateMachine()
    owner = Owner()
    machine.add_state(0, State().with_on_end(lambda o: o.log.append("end")))
    machine.set_state(0)
    machine.update(owner, 0.1)
    assert owner.log == []
    assert machine.state() == 0


def test_set_state_inside_update_applies_next_frame():
    machine = StateMachine()
    owner = Owner()
    machine.add_state(0, State().with_update(lambda o, dt: machine.set_state(2)))
    machine.update(owner, 0.1)
    assert machine.state() == 0
    machine.update(owner, 0.1)
    assert machine.state() == 2


def test_entry_coroutine_is_polled_with_dt():
    context = CoroutinesContext()
    machine = StateMachine()
    owner = Owner()

    async def entry(o):
        o.log.append("start")
        await wait_seconds(0.5)
        o.log.append("done")

    machine.add_state(1, State().with_coroutine(lambda o: context.start_coroutine(entry(o))))
    machine.set_state(1)
    machine.update(owner, 0.25)
    coroutine = machine.active_coroutine
    assert owner.log == ["start"]
    assert not coroutine.is_done()
    machine.update(owner, 0.25)
    assert owner.log == ["start", "done"]
    assert coroutine.is_done()


def test_automatic_update_does_not_step_entry_coroutine():
    context = CoroutinesContext()
    machine = StateMachine()
    owner = Owner()

    async def entry(o):
        o.log.append("ran")

    machine.add_state(1, State().with_coroutine(lambda o: context.start_coroutine(entry(o))))
    machine.set_state(1)
    machine.update(owner, 0.0)
    assert owner.log == ["ran"]
    context.update(0.1)
    assert owner.log == ["ran"]


def test_with_methods_return_new_states():
    base = State()
    extended = base.with_update(lambda o, dt: None)
    assert base.update is None
    assert extended.update is not None and extended.on_end is None


@pytest.mark.parametrize("state_id", [MAX_STATE, -1])
def test_out_of_range_ids_rejected(state_id):
    machine = StateMachine()
    with pytest.raises(ValueError):
        machine.add_state(state_id, State())
    with pytest.raises(ValueError):
        machine.set_state(state_id)