"""feedgen extension writing iTunes tags exactly as given.

The stock podcast extension validates ``itunes:duration`` and limits
``itunes:explicit`` to yes/no/clean. Catalog values are free form, so these
two tags are written verbatim here instead.
"""

from feedgen.ext.base import BaseEntryExtension, BaseExtension
from feedgen.util import xml_elem

ITUNES_NS = "http://www.itunes.com/dtds/podcast-1.0.dtd"


class ItunesVerbatimExtension(BaseExtension):
    def __init__(self):
        self.__explicit = None

    def extend_ns(self):
        return {"itunes": ITUNES_NS}

    def extend_rss(self, rss_feed):
        channel = rss_feed[0]
        if self.__explicit is not None:
            explicit = xml_elem("{%s}explicit" % ITUNES_NS, channel)
            explicit.text = self.__explicit
        return rss_feed

    def explicit(self, value=None):
        if value is not None:
            self.__explicit = str(value)
        return self.__explicit


class ItunesVerbatimEntryExtension(BaseEntryExtension):
    def __init__(self):
        self.__duration = None
        self.__explicit = None

    def extend_rss(self, entry):
        if self.__duration is not None:
            duration = xml_elem("{%s}duration" % ITUNES_NS, entry)
            duration.text = self.__duration
        if self.__explicit is not None:
            explicit = xml_elem("{%s}explicit" % ITUNES_NS, entry)
            explicit.text = self.__explicit
        return entry

    def duration(self, value=None):
        if value is not None:
            self.__duration = str(value)
        return self.__duration

    def explicit(self, value=None):
        if value is not None:
            self.__explicit = str(value)
        return self.__explicit
