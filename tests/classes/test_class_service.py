import pytest

from attendance_register.core.enums import StoreKey
from attendance_register.core.exceptions import NotFoundError, StoreError, ValidationError


def test_create_and_rename(container):
    cls = container.class_service.create(name="  Class 9 ")
    assert cls.name == "Class 9"
    assert cls.class_id.startswith("_") and len(cls.class_id) == 10

    renamed = container.class_service.rename(class_id=cls.class_id, name="Class 9-B")
    assert [c.name for c in container.class_service.list_all()] == ["Class 9-B"]
    assert renamed.class_id == cls.class_id


def test_blank_name_is_rejected_without_saving(container, store):
    with pytest.raises(ValidationError):
        container.class_service.create(name="   ")
    assert store.saves == []


def test_delete_cascades_only_to_students_of_that_class(container, store):
    c1 = container.class_service.create(name="A")
    c2 = container.class_service.create(name="B")
    s = container.student_service
    s.create(class_id=c1.class_id, student_id="1", name="One")
    s.create(class_id=c1.class_id, student_id="2", name="Two")
    keep = s.create(class_id=c2.class_id, student_id="3", name="Three")
    store.saves.clear()

    removed = container.class_service.delete(class_id=c1.class_id)

    assert removed == 2
    assert [x.student_pk for x in s.list_all()] == [keep.student_pk]
    assert [c.class_id for c in container.class_service.list_all()] == [c2.class_id]
    # dependents first, then the parent
    assert store.saves == [StoreKey.STUDENTS, StoreKey.CLASSES]


def test_delete_without_students_only_writes_classes(container, store):
    cls = container.class_service.create(name="Empty")
    store.saves.clear()
    container.class_service.delete(class_id=cls.class_id)
    assert store.saves == [StoreKey.CLASSES]


def test_delete_is_not_atomic(container, store):
    cls = container.class_service.create(name="A")
    container.student_service.create(class_id=cls.class_id, student_id="1", name="One")
    store.fail_on_save.add(StoreKey.CLASSES)

    with pytest.raises(StoreError):
        container.class_service.delete(class_id=cls.class_id)

    # students were already removed; the class survives
    assert container.student_service.list_all() == []
    assert [c.class_id for c in container.class_service.list_all()] == [cls.class_id]


def test_unknown_class(container):
    with pytest.raises(NotFoundError):
        container.class_service.delete(class_id="_missing")
    with pytest.raises(NotFoundError):
        container.class_service.rename(class_id="_missing", name="x")
