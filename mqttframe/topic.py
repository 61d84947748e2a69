"""Topic and topic filter validation and matching."""


def has_wildcards(s: str) -> bool:
    return "+" in s or "#" in s


def valid_topic(topic: str) -> bool:
    """A topic name may not contain wildcards."""
    return not has_wildcards(topic)


def valid_filter(topic_filter: str) -> bool:
    if not topic_filter:
        return False
    *rest, last = topic_filter.split("/")
    if len(last) != 1 and ("#" in last or "+" in last):
        return False
    for entry in rest:
        if "#" in entry:
            return False
        if len(entry) > 1 and "+" in entry:
            return False
    return True


def matches(topic: str, topic_filter: str) -> bool:
    """Check whether ``topic`` matches ``topic_filter``; neither is validated."""
    if topic.startswith("$"):
        return False
    topics = iter(topic.split("/"))
    for level in topic_filter.split("/"):
        if level == "#":
            return True
        current = next(topics, None)
        if current is None or current == "#":
            return False
        if level == "+":
            continue
        if level != current:
            return False
    return next(topics, None) is None