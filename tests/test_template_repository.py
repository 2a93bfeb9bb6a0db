import pytest

from conftest import APP_ID, OWNER_ID, fixed_clock, sheet_fields
from labelsheet.modules.store import owner_collection_path
from labelsheet.modules.templates import (
    LabelDimensions,
    Margins,
    PageSizeType,
    StandardPageSize,
    TemplateNotFoundError,
    TemplatePersistenceError,
    TemplateRepository,
    TemplateSyncError,
    validate_template,
)


def _payload(**overrides):
    return validate_template(sheet_fields(**overrides))


async def test_operations_require_an_owner(flaky_store):
    repository = TemplateRepository(flaky_store, APP_ID)

    with pytest.raises(TemplatePersistenceError):
        await repository.create(_payload())
    with pytest.raises(TemplatePersistenceError):
        await repository.refresh()
    assert flaky_store.calls == []


async def test_create_sheet1_scenario(repository, flaky_store):
    template_id = await repository.create(_payload())

    assert flaky_store.calls == ["add", "get_all"]
    assert len(repository.templates) == 1
    template = repository.templates[0]
    assert template.id == template_id
    assert template.name == "Sheet1"
    assert template.page_size == StandardPageSize(PageSizeType.A4)
    assert (template.page_size.width, template.page_size.height) == (210, 297)
    assert template.margins == Margins(10, 10, 10, 10)
    assert template.label_dimensions == LabelDimensions(50, 30)
    assert (template.gap_horizontal, template.gap_vertical) == (5, 5)
    assert template.owner_id == OWNER_ID
    assert template.created_at == "2026-10-18T09:00:00.000Z"


async def test_each_create_adds_exactly_one_record(repository):
    await repository.create(_payload(name="first"))
    before = repository.templates

    await repository.create(_payload(name="second", label_width="70.5"))

    assert len(repository.templates) == len(before) + 1
    assert repository.templates is not before
    assert sorted(t.name for t in repository.templates) == ["first", "second"]


async def test_update_overwrites_record_and_keeps_id(repository):
    template_id = await repository.create(_payload())

    await repository.update(template_id, _payload(name="Renamed", page_size_type="Custom", custom_width="100", custom_height="120"))

    [template] = repository.templates
    assert template.id == template_id
    assert template.name == "Renamed"
    assert template.page_size.type is PageSizeType.CUSTOM
    assert (template.page_size.width, template.page_size.height) == (100, 120)
    assert template.owner_id == OWNER_ID


async def test_update_with_same_payload_is_idempotent(repository):
    template_id = await repository.create(_payload())
    payload = _payload(name="Stable", gap_vertical="2.5")

    await repository.update(template_id, payload)
    first = repository.get(template_id)
    await repository.update(template_id, payload)
    second = repository.get(template_id)

    assert first == second


async def test_update_unknown_id_fails(repository):
    with pytest.raises(TemplateNotFoundError):
        await repository.update("missing", _payload())


async def test_delete_resyncs_list(repository, flaky_store):
    template_id = await repository.create(_payload())
    flaky_store.calls.clear()

    await repository.delete(template_id)

    assert flaky_store.calls == ["delete", "get_all"]
    assert repository.templates == ()


async def test_failed_write_leaves_list_untouched(repository, flaky_store):
    await repository.create(_payload(name="kept"))
    before = repository.templates
    flaky_store.fail_on.add("add")
    flaky_store.calls.clear()

    with pytest.raises(TemplatePersistenceError) as excinfo:
        await repository.create(_payload(name="lost"))

    assert not excinfo.value.committed
    assert flaky_store.calls == ["add"]
    assert repository.templates is before


async def test_failed_resync_after_write_reports_committed(repository, flaky_store, store):
    await repository.refresh()
    flaky_store.fail_on.add("get_all")

    with pytest.raises(TemplateSyncError) as excinfo:
        await repository.create(_payload())

    assert excinfo.value.committed
    assert excinfo.value.template_id is not None
    assert repository.templates == ()
    stored = await store.get_all(owner_collection_path(APP_ID, OWNER_ID))
    assert [doc.id for doc in stored] == [excinfo.value.template_id]


async def test_malformed_documents_are_skipped(repository, store):
    await store.add(owner_collection_path(APP_ID, OWNER_ID), {"name": "broken"})
    await repository.create(_payload())

    assert [t.name for t in repository.templates] == ["Sheet1"]


async def test_owners_see_only_their_templates(repository, flaky_store):
    await repository.create(_payload())
    other = TemplateRepository(flaky_store, APP_ID, clock=fixed_clock)
    other.bind_owner("user-2")

    assert await other.refresh() == ()


async def test_rebinding_owner_discards_list(repository):
    await repository.create(_payload())

    repository.bind_owner("user-2")

    assert repository.templates == ()
    assert not repository.loaded
