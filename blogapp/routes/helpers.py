from flask import abort, flash, g, redirect, request, session, url_for


OLD_INPUT_KEY = "_old_input"


def parse_id(value):
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def parse_ids(values):
    ids = []
    for value in values:
        if value is None or not str(value).strip():
            continue
        try:
            ids.append(int(value))
        except ValueError:
            abort(400, description=f"Invalid id: {value}")
    return ids


def flash_errors(messages):
    for message in messages:
        flash(message, "danger")


def flash_input(form, exclude=()):
    session[OLD_INPUT_KEY] = {
        key: values
        for key, values in form.to_dict(flat=False).items()
        if key not in exclude
    }


def redirect_back(fallback_endpoint="posts.index"):
    return redirect(request.referrer or url_for(fallback_endpoint))


def fail_back(result, form, exclude=()):
    flash_errors(result.messages)
    flash_input(form, exclude=exclude)
    return redirect_back()


def load_old_input():
    g.old_input = session.pop(OLD_INPUT_KEY, {})


def old(field_name, default=""):
    values = g.get("old_input", {}).get(field_name)
    if not values:
        return default
    return values[0]


def old_list(field_name):
    return g.get("old_input", {}).get(field_name, [])


def has_old_input():
    return bool(g.get("old_input"))
