import pytest

from model_configuration.value_origin import (
    ValueOriginDeterminationMethods,
    ValueOriginSources,
)


def test_catalog_ids_are_unique():
    for catalog in (ValueOriginSources, ValueOriginDeterminationMethods):
        ids = [member.id for member in catalog.all()]
        assert len(ids) == len(set(ids))
        assert catalog.UNDEFINED in catalog.all()


def test_lookup_by_id():
    assert ValueOriginSources.by_id(4) is ValueOriginSources.PUBLICATION
    assert ValueOriginDeterminationMethods.by_id(2).display == "Manual Fit"
    with pytest.raises(KeyError):
        ValueOriginSources.by_id(404)
