from .base import BaseWebTemplate


class BasicWebTemplate(BaseWebTemplate):
    name = "basic_www"
    path = "basic_www"
    description = "Static HTML/CSS/JavaScript starter page"
