from .basic_www import BasicWebTemplate

WEB_TEMPLATES = {
    BasicWebTemplate.name: BasicWebTemplate,
}

DEFAULT_WEB_TEMPLATE = BasicWebTemplate.name
