import pytest

from slidr.exceptions import DuplicateEmail, UserHasProjects
from slidr.models.project import Project
from slidr.models.user import User


def make_user(email="a@x.com", password="p1"):
    return User(first_name="Ada", last_name="Lovelace", email=email, password=password)


def test_save_assigns_id_and_finds_by_email_and_id(users):
    saved = users.save(make_user())

    assert saved.id is not None
    assert users.find_by_email("a@x.com").id == saved.id
    assert users.find_by_id(saved.id).email == "a@x.com"


def test_lookups_return_none_when_missing(users):
    assert users.find_by_email("nobody@x.com") is None
    assert users.find_by_id(42) is None


def test_email_lookup_is_exact_match(users):
    users.save(make_user(email="a@x.com"))

    assert users.find_by_email("A@x.com") is None


def test_duplicate_email_fails_the_write(users):
    original = users.save(make_user(password="p1"))

    with pytest.raises(DuplicateEmail):
        users.save(make_user(password="other"))

    stored = users.find_by_email("a@x.com")
    assert stored.id == original.id
    assert stored.password == "p1"


def test_delete_user_without_projects(users):
    user = users.save(make_user())
    user_id = user.id

    users.delete(user)

    assert users.find_by_id(user_id) is None


def test_delete_user_owning_projects_is_restricted(users, projects):
    user = users.save(make_user())
    projects.save(Project(title="Deck", content="{}", user=user))

    with pytest.raises(UserHasProjects):
        users.delete(user)

    remaining = users.find_by_id(user.id)
    assert remaining is not None
    assert len(projects.find_by_user(remaining)) == 1


def test_find_by_user_only_returns_owned_projects(users, projects):
    alice = users.save(make_user(email="alice@x.com"))
    bob = users.save(make_user(email="bob@x.com"))
    projects.save(Project(title="A1", user=alice))
    projects.save(Project(title="A2", user=alice))
    projects.save(Project(title="B1", user=bob))

    titles = {p.title for p in projects.find_by_user(alice)}

    assert titles == {"A1", "A2"}
    assert projects.find_by_user(users.save(make_user(email="carol@x.com"))) == []


def test_project_delete_removes_row(users, projects):
    user = users.save(make_user())
    project = projects.save(Project(title="Deck", user=user))
    project_id = project.id

    projects.delete(project)

    assert projects.find_by_id(project_id) is None
