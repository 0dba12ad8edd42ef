"""Tests for level and class gating."""

import pytest

from rpginventory.core import DenialReason, EligibilityFilter
from rpginventory.data.models import Actor, CustomItem, ItemStack, PetItem, PET_TAG

from conftest import tagged


class FakePets:
    """Pet lookup keyed by the pet tag."""

    def __init__(self, pets):
        self.pets = {pet.id: pet for pet in pets}

    def get_pet_from_item(self, stack):
        return self.pets.get(stack.get_tag(PET_TAG))


@pytest.fixture
def messages():
    return []


@pytest.fixture
def eligibility(registry, language, messages):
    pets = FakePets([PetItem(id="wolf", level=30), PetItem(id="cat", classes=("Mage",))])
    return EligibilityFilter(
        registry,
        language,
        pets=pets,
        messenger=lambda actor, text: messages.append((actor.name, text)),
    )


def make_item(level=None, classes=None):
    return CustomItem(id="gated", name="Gated", level=level, classes=classes)


class TestIsAllowed:
    """Tests for is_allowed on classified items."""

    @pytest.mark.parametrize("level,classes,expected", [
        (None, None, True),
        (10, None, True),
        (11, None, False),
        (None, ("Warrior",), True),
        (None, ("Mage", "Rogue"), False),
        (10, ("Warrior", "Mage"), True),
        (11, ("Warrior",), False),
        (5, ("Mage",), False),
    ])
    def test_level_and_class_conjunction(self, eligibility, actor, level, classes, expected):
        assert eligibility.is_allowed(actor, make_item(level, classes)) is expected

    def test_actor_without_class_fails_class_gate(self, eligibility):
        actor = Actor(name="Nobody", level=99)
        assert not eligibility.is_allowed(actor, make_item(classes=("Warrior",)))
        assert eligibility.is_allowed(actor, make_item(level=99))

    def test_no_notification_by_default(self, eligibility, actor, messages):
        eligibility.is_allowed(actor, make_item(level=50))
        assert messages == []

    def test_level_notification(self, eligibility, actor, messages):
        assert not eligibility.is_allowed(actor, make_item(level=50, classes=("Mage",)), notify=True)
        assert messages == [("Steve", "need level 50")]

    def test_class_notification(self, eligibility, actor, messages):
        assert not eligibility.is_allowed(actor, make_item(classes=("Mage", "Rogue")), notify=True)
        assert messages == [("Steve", "only for Mage, Rogue")]

    def test_allowed_sends_nothing(self, eligibility, actor, messages):
        assert eligibility.is_allowed(actor, make_item(level=1), notify=True)
        assert messages == []

    def test_notify_without_messenger(self, registry, language, actor):
        eligibility = EligibilityFilter(registry, language)
        assert not eligibility.is_allowed(actor, make_item(level=50), notify=True)


class TestCheck:
    """Tests for the detailed result."""

    def test_level_reason(self, eligibility, actor):
        result = eligibility.check(actor, make_item(level=50, classes=("Mage",)))
        assert not result
        assert result.reason == DenialReason.LEVEL
        assert result.message == "need level 50"

    def test_class_reason(self, eligibility, actor):
        result = eligibility.check(actor, make_item(classes=("Mage",)))
        assert result.reason == DenialReason.CLASS
        assert result.message == "only for Mage"

    def test_allowed(self, eligibility, actor):
        result = eligibility.check(actor, make_item())
        assert result
        assert result.reason is None


class TestAllowedForStack:
    """Tests for handle resolution."""

    def test_custom_item(self, eligibility, actor):
        assert eligibility.allowed_for_stack(actor, tagged("sword_of_fire"))
        assert not eligibility.allowed_for_stack(actor, tagged("heavy_axe"))

    def test_pets_use_the_same_gate(self, eligibility, actor):
        wolf = ItemStack(texture="BONE").with_tag(PET_TAG, "wolf")
        cat = ItemStack(texture="FISH").with_tag(PET_TAG, "cat")
        assert not eligibility.allowed_for_stack(actor, wolf)
        assert not eligibility.allowed_for_stack(actor, cat)

        mage = Actor(name="Alex", level=30, class_name="Mage")
        assert eligibility.allowed_for_stack(mage, wolf)
        assert eligibility.allowed_for_stack(mage, cat)

    def test_plain_stack_allowed(self, eligibility, actor):
        assert eligibility.allowed_for_stack(actor, ItemStack(texture="DIRT"))
        assert eligibility.allowed_for_stack(actor, None)
