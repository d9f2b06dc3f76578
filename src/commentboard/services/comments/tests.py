import threading

from pytest import raises

from commentboard.app import Application
from commentboard.core.models import Comment
from commentboard.services import ServiceNotRegistered, get_service
from commentboard.services.comments import CommentStoreService


def test_registered(app: Application):
    with app.app_context():
        store = get_service("comments")
        assert isinstance(store, CommentStoreService)
        assert store.running


def test_append_and_all(store: CommentStoreService):
    assert store.all() == ()

    comment = store.append("alice", "first")
    assert comment == Comment(author="alice", body="first")

    store.append("bob", "second")
    store.append("carol", "third")
    assert [c.author for c in store.all()] == ["alice", "bob", "carol"]
    assert store.count() == 3


def test_all_is_a_snapshot(store: CommentStoreService):
    store.append("alice", "first")
    snapshot = store.all()
    store.append("bob", "second")

    assert len(snapshot) == 1
    assert isinstance(snapshot, tuple)
    assert len(store.all()) == 2


def test_comments_are_immutable(store: CommentStoreService):
    comment = store.append("alice", "<b>hi</b>")
    with raises(AttributeError):
        comment.body = "edited"


def test_stop_discards_comments(store: CommentStoreService):
    store.append("alice", "first")
    store.stop()
    assert not store.running

    store.start()
    assert store.all() == ()


def test_concurrent_appends(app: Application):
    def post(n):
        with app.app_context():
            store = get_service("comments")
            for i in range(50):
                store.append(f"thread-{n}", str(i))

    threads = [threading.Thread(target=post, args=(n,)) for n in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    with app.app_context():
        comments = get_service("comments").all()

    assert len(comments) == 200
    for n in range(4):
        bodies = [c.body for c in comments if c.author == f"thread-{n}"]
        assert bodies == [str(i) for i in range(50)]


def test_not_registered():
    from flask import Flask

    app = Flask(__name__)
    service = CommentStoreService()
    with app.app_context():
        with raises(ServiceNotRegistered):
            service.all()
        assert not service.running


def test_start_and_stop_check_state(store: CommentStoreService):
    with raises(RuntimeError):
        store.start()

    store.stop()
    with raises(RuntimeError):
        store.stop()


def test_restart_empties_log(app: Application):
    with app.app_context():
        store = get_service("comments")
        store.append("alice", "first")
        state = store.app_state

        app.stop_services()
        assert state.comments == []
        assert not state.running

        app.start_services()
        assert state.running
        assert store.all() == ()
