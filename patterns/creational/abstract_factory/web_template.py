"""
Template engines as product families.

A factory hands out a title template, a page template built around that title,
and the renderer that understands their placeholder syntax. Mixing a Twig page
with the PHP renderer is impossible through the factory.
"""

import re
from abc import ABC, abstractmethod
from typing import Dict


class TitleTemplate(ABC):
    @abstractmethod
    def get_template_string(self) -> str:
        pass


class PageTemplate(ABC):
    def __init__(self, title_template: TitleTemplate):
        self.title_template = title_template

    @abstractmethod
    def get_template_string(self) -> str:
        pass


class TemplateRenderer(ABC):
    @abstractmethod
    def render(self, template_string: str, params: Dict[str, str]) -> str:
        pass


class TwigTitleTemplate(TitleTemplate):
    def get_template_string(self) -> str:
        return "<h1>{{ title }}</h1>"


class TwigPageTemplate(PageTemplate):
    def get_template_string(self) -> str:
        title = self.title_template.get_template_string()
        return (
            '<div class="page">\n'
            f"    {title}\n"
            '    <article class="content">{{ content }}</article>\n'
            "</div>"
        )


class TwigRenderer(TemplateRenderer):
    placeholder = re.compile(r"\{\{ (\w+) \}\}")

    def render(self, template_string: str, params: Dict[str, str]) -> str:
        return self.placeholder.sub(lambda m: params.get(m.group(1), ""), template_string)


class PHPTemplateTitleTemplate(TitleTemplate):
    def get_template_string(self) -> str:
        return "<h1><?= $title; ?></h1>"


class PHPTemplatePageTemplate(PageTemplate):
    def get_template_string(self) -> str:
        title = self.title_template.get_template_string()
        return (
            '<div class="page">\n'
            f"    {title}\n"
            '    <article class="content"><?= $content; ?></article>\n'
            "</div>"
        )


class PHPTemplateRenderer(TemplateRenderer):
    placeholder = re.compile(r"<\?= \$(\w+); \?>")

    def render(self, template_string: str, params: Dict[str, str]) -> str:
        return self.placeholder.sub(lambda m: params.get(m.group(1), ""), template_string)


class TemplateFactory(ABC):
    @abstractmethod
    def create_title_template(self) -> TitleTemplate:
        pass

    @abstractmethod
    def create_page_template(self) -> PageTemplate:
        pass

    @abstractmethod
    def get_renderer(self) -> TemplateRenderer:
        pass


class TwigTemplateFactory(TemplateFactory):
    def create_title_template(self) -> TitleTemplate:
        return TwigTitleTemplate()

    def create_page_template(self) -> PageTemplate:
        return TwigPageTemplate(self.create_title_template())

    def get_renderer(self) -> TemplateRenderer:
        return TwigRenderer()


class PHPTemplateFactory(TemplateFactory):
    def create_title_template(self) -> TitleTemplate:
        return PHPTemplateTitleTemplate()

    def create_page_template(self) -> PageTemplate:
        return PHPTemplatePageTemplate(self.create_title_template())

    def get_renderer(self) -> TemplateRenderer:
        return PHPTemplateRenderer()


class Page:
    def __init__(self, title: str, content: str):
        self.title = title
        self.content = content

    def render(self, factory: TemplateFactory) -> str:
        template = factory.create_page_template()
        renderer = factory.get_renderer()
        return renderer.render(
            template.get_template_string(),
            {"title": self.title, "content": self.content},
        )


def main() -> None:
    page = Page("Sample page", "This is the body.")

    print("Testing actual rendering with the PHPTemplate factory:")
    print(page.render(PHPTemplateFactory()))

    print("\nTesting actual rendering with the Twig factory:")
    print(page.render(TwigTemplateFactory()))


if __name__ == "__main__":
    main()
