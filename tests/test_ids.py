import threading
from ids import IdGenerator

def test_first_id_follows_start_value():
    gen = IdGenerator()
    assert gen.peek() == 1000
    assert gen.next_id() == 1001
    assert gen.next_id() == 1002
    assert gen.peek() == 1002

def test_custom_start():
    gen = IdGenerator(start=0)
    assert [gen.next_id() for _ in range(3)] == [1, 2, 3]
    assert gen.start == 0

def test_separate_generators_do_not_share_state():
    a = IdGenerator()
    b = IdGenerator()
    a.next_id()
    a.next_id()
    assert b.next_id() == 1001

def test_concurrent_ids_are_unique():
    gen = IdGenerator()
    issued = []
    issued_lock = threading.Lock()

    def worker():
        local = [gen.next_id() for _ in range(500)]
        with issued_lock:
            issued.extend(local)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(issued) == 4000
    assert len(set(issued)) == 4000
    assert max(issued) == 5000
