from whatdo.dolist import DoList


def assert_invariants(dolist: DoList) -> None:
    """No duplicates in either container, and every queued task is a member."""
    tasks, queue = dolist.tasks, dolist.queue
    assert len(set(tasks)) == len(tasks)
    assert len(set(queue)) == len(queue)
    assert set(queue) <= set(tasks)
