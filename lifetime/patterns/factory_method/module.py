"""Factory Method demo - resumes and reports creating their own pages."""

from lifetime.core import Demo

from .documents import Report, Resume


class FactoryMethodDemo(Demo):

    @property
    def name(self) -> str:
        return "factory_method"

    @property
    def display_name(self) -> str:
        return "Factory Method"

    @property
    def description(self) -> str:
        return (
            "Define an interface for creating an object, but let subclasses decide "
            "which class to instantiate"
        )

    @property
    def category(self) -> str:
        return "creational"

    @property
    def participants(self):
        return {
            "Product": ["Page"],
            "ConcreteProduct": [
                "SkillsPage", "EducationPage", "ExperiencePage", "IntroductionPage",
                "ResultsPage", "ConclusionPage", "SummaryPage", "BibliographyPage",
            ],
            "Creator": ["Document"],
            "ConcreteCreator": ["Resume", "Report"],
        }

    def compute(self):
        # Constructors call the factory method
        documents = [Resume(), Report()]

        for document in documents:
            print(f"\n{type(document).__name__}:")
            for page in document.pages:
                print(f"\t{type(page).__name__}")
