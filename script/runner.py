def tags(*names):
    """Attach a read-only ``tags`` tuple to a deploy script."""
    def decorator(func):
        func.tags = tuple(names)
        return func
    return decorator


def parse_tags(value):
    if not value:
        return ()
    return tuple(tag.strip() for tag in value.split(",") if tag.strip())


def select_scripts(scripts, selected_tags=None):
    if not selected_tags:
        return list(scripts)
    wanted = set(selected_tags)
    return [script for script in scripts if wanted.intersection(getattr(script, "tags", ()))]


def run_deploy_scripts(scripts, context, network_name, selected_tags=None) -> list:
    """Run the scripts matching ``selected_tags`` in order.

    Returns the names of the scripts that ran. A failing script stops the run.
    """
    ran = []
    for script in select_scripts(scripts, selected_tags):
        script(context, network_name)
        ran.append(script.__name__)
    return ran
