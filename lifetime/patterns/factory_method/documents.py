"""Documents whose subclasses decide which pages to create."""

from abc import ABC, abstractmethod
from typing import List


class Page:
    """The product."""


class SkillsPage(Page):
    pass


class EducationPage(Page):
    pass


class ExperiencePage(Page):
    pass


class IntroductionPage(Page):
    pass


class ResultsPage(Page):
    pass


class ConclusionPage(Page):
    pass


class SummaryPage(Page):
    pass


class BibliographyPage(Page):
    pass


class Document(ABC):
    """The creator. The constructor calls the factory method."""

    def __init__(self):
        self.pages: List[Page] = []
        self.create_pages()

    @abstractmethod
    def create_pages(self):
        """Factory method."""


class Resume(Document):
    def create_pages(self):
        self.pages.append(SkillsPage())
        self.pages.append(EducationPage())
        self.pages.append(ExperiencePage())


class Report(Document):
    def create_pages(self):
        self.pages.append(IntroductionPage())
        self.pages.append(ResultsPage())
        self.pages.append(ConclusionPage())
        self.pages.append(SummaryPage())
        self.pages.append(BibliographyPage())
