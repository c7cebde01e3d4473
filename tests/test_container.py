"""Tests for the DI container (container.py)."""

from __future__ import annotations

from stressgen.application.populate import ObjectGenerator
from stressgen.application.registry import PropertySetterRegistry
from stressgen.config.settings import Settings
from stressgen.container import Container, create_container
from stressgen.infrastructure.generators import ConstantValueGenerator, RandomValueGenerators


class Profile:
    handle: str
    followers: int
    interests: list[str]

    def add_interest(self, interest: str) -> None:
        self.interests.append(interest)


class Wrapper:
    profile: Profile


class TestContainerCreation:
    def test_wires_collaborators(self):
        container = create_container(Settings(seed=1))
        assert isinstance(container, Container)
        assert isinstance(container.generators, RandomValueGenerators)
        assert isinstance(container.registry, PropertySetterRegistry)
        assert isinstance(container.objects, ObjectGenerator)
        assert container.generators.fallback == container.objects.value_generator

    def test_containers_are_independent(self):
        first = create_container(Settings(seed=1))
        second = create_container(Settings(seed=1))
        first.register(Profile, "followers", ConstantValueGenerator(10))
        assert len(first.registry) == 1
        assert len(second.registry) == 0


class TestContainerGenerate:
    def test_generate_populates_instance(self):
        container = create_container(Settings(seed=5))
        profile = container.generate(Profile)
        assert isinstance(profile.handle, str)
        assert isinstance(profile.followers, int)
        assert profile.interests
        assert all(isinstance(i, str) for i in profile.interests)

    def test_same_seed_same_instance(self):
        first = create_container(Settings(seed=11)).generate(Profile)
        second = create_container(Settings(seed=11)).generate(Profile)
        assert (first.handle, first.followers, first.interests) == (
            second.handle,
            second.followers,
            second.interests,
        )

    def test_registered_override_used(self):
        container = create_container(Settings(seed=5))
        container.register(Profile, "followers", ConstantValueGenerator(42))
        assert container.generate(Profile).followers == 42

    def test_nested_generation(self):
        container = create_container(Settings(seed=5))
        wrapper = container.generate(Wrapper)
        assert isinstance(wrapper.profile, Profile)

    def test_plan_and_populate(self):
        container = create_container(Settings(seed=5))
        identities = [s.identity for s in container.plan(Profile)]
        assert identities[0] == "interests / -"

        profile = Profile()
        report = container.populate(profile)
        assert report.skipped == []
