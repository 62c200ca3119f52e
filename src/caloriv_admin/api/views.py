"""Server-rendered HTML for the admin screens."""

from collections.abc import Iterable, Mapping, Sequence
from html import escape
from urllib.parse import quote, urlsplit

from caloriv_admin.domain.catalog import (
    EXERCISE_CATEGORIES,
    EXERCISE_DIFFICULTIES,
    FOOD_CATEGORIES,
    Exercise,
    Food,
)
from caloriv_admin.domain.content import (
    ANNOUNCEMENT_TYPES,
    Announcement,
    AppConfig,
    DashboardStats,
    Promotion,
)
from caloriv_admin.domain.users import AppUser
from caloriv_admin.services.approvals import PendingSubmissions
from caloriv_admin.services.bulk import SAMPLE_BULK_PAYLOAD

NAV_LINKS = (
    ("/admin/dashboard", "Dashboard"),
    ("/admin/foods", "Foods"),
    ("/admin/exercises", "Exercises"),
    ("/admin/users", "Users"),
    ("/admin/approvals", "Approvals"),
    ("/admin/announcements", "Announcements"),
    ("/admin/promotions", "Promotions"),
    ("/admin/updates", "App Updates"),
)

ANNOUNCEMENT_LABELS = {
    "info": "Information (Blue)",
    "warning": "Warning (Orange)",
    "success": "Success (Green)",
}

_STYLE = """
      :root { --bg: #f7f7f9; --fg: #1d1d1f; --card: #ffffff; --muted: #6b7280;
              --accent: #10b981; --danger: #ef4444; --border: #e5e7eb; }
      html[data-theme="dark"] { --bg: #0f172a; --fg: #f1f5f9; --card: #1e293b;
              --muted: #94a3b8; --border: #334155; }
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 0;
             background: var(--bg); color: var(--fg); }
      nav { display: flex; flex-wrap: wrap; gap: 0.75rem; align-items: center;
            padding: 0.75rem 2rem; background: var(--card);
            border-bottom: 1px solid var(--border); }
      nav a { color: var(--fg); text-decoration: none; }
      nav a.active { color: var(--accent); font-weight: 600; }
      nav form { display: inline; margin: 0; }
      main { max-width: 72rem; margin: 0 auto; padding: 2rem; }
      footer { text-align: center; color: var(--muted); padding: 2rem; }
      .card { background: var(--card); border: 1px solid var(--border);
              border-radius: 0.75rem; padding: 1.25rem; margin-bottom: 1rem; }
      .grid { display: grid; gap: 1rem;
              grid-template-columns: repeat(auto-fit, minmax(12rem, 1fr)); }
      .stat { font-size: 2.25rem; font-weight: 700; }
      .banner { padding: 0.75rem 1rem; border-radius: 0.5rem; margin-bottom: 1rem; }
      .banner.error { background: #fee2e2; color: #991b1b; }
      .banner.success { background: #dcfce7; color: #166534; }
      .muted { color: var(--muted); }
      .badge { padding: 0.1rem 0.5rem; border-radius: 999px; font-size: 0.8rem;
               border: 1px solid var(--border); }
      table { width: 100%; border-collapse: collapse; }
      th, td { text-align: left; padding: 0.5rem; border-bottom: 1px solid var(--border); }
      label { display: block; font-weight: 600; margin: 0.75rem 0 0.25rem; }
      input, select, textarea { padding: 0.4rem 0.6rem; width: 100%;
                                box-sizing: border-box; }
      input[type=checkbox] { width: auto; }
      button, .button { padding: 0.4rem 0.8rem; margin-right: 0.5rem;
                        cursor: pointer; }
      .danger { color: var(--danger); }
      .inline { display: inline; }
      .thumb { width: 3rem; height: 3rem; object-fit: cover; border-radius: 0.5rem; }
"""


def render_page(
    title: str, body: str, *, theme: str = "light", signed_in: bool = True
) -> str:
    """Wrap a screen body in the shared layout."""
    nav = _navbar(title) if signed_in else ""
    return f"""<!doctype html>
<html lang="en" data-theme="{_e(theme)}">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>{_e(title)} · Caloriv Admin</title>
    <style>{_STYLE}</style>
  </head>
  <body>
    {nav}
    <main>
      {body}
    </main>
    <footer>Caloriv Admin</footer>
  </body>
</html>
"""


def _navbar(active_title: str) -> str:
    links = "".join(
        f'<a href="{href}"{_active(label == active_title)}>{_e(label)}</a>'
        for href, label in NAV_LINKS
    )
    return (
        f"<nav><strong>Caloriv</strong>{links}"
        '<form method="post" action="/theme">'
        '<button type="submit" aria-label="Toggle theme">Theme</button></form>'
        '<form method="post" action="/logout">'
        '<button type="submit">Logout</button></form></nav>'
    )


def error_banner(message: str | None) -> str:
    if not message:
        return ""
    return f'<div class="banner error" role="alert">{_e(message)}</div>'


def success_banner(message: str | None) -> str:
    if not message:
        return ""
    return f'<div class="banner success" role="status">{_e(message)}</div>'


# Auth


def login_page(error: str | None = None, email: str = "") -> str:
    body = f"""
      <div class="card" style="max-width: 24rem; margin: 4rem auto;">
        <h1>Caloriv Admin</h1>
        {error_banner(error)}
        <form method="post" action="/login">
          <label for="email">Email</label>
          <input id="email" name="email" type="email" value="{_e(email)}" required />
          <label for="password">Password</label>
          <input id="password" name="password" type="password" required />
          <p><button type="submit">Sign in</button></p>
        </form>
      </div>"""
    return body


# Dashboard


def dashboard_page(stats: DashboardStats) -> str:
    cards = [
        ("Total Users", stats.users, "/admin/users"),
        ("Total Foods", stats.foods, "/admin/foods"),
        ("Total Exercises", stats.exercises, "/admin/exercises"),
        ("Pending Submissions", stats.pending, "/admin/approvals"),
    ]
    stat_cards = "".join(
        f'<a class="card" href="{href}"><div class="stat">{value}</div>'
        f'<div class="muted">{_e(label)}</div></a>'
        for label, value, href in cards
    )
    return f"""
      <h1>Caloriv Command Center</h1>
      <div class="grid">{stat_cards}</div>
      <h2>Quick actions</h2>
      <div class="grid">
        <a class="card" href="/admin/foods/new">Add Food</a>
        <a class="card" href="/admin/exercises/new">Add Exercise</a>
        <a class="card" href="/admin/announcements">Post Announcement</a>
        <a class="card" href="/admin/updates">App Update Settings</a>
      </div>"""


# Foods


def foods_page(
    foods: Sequence[Food],
    total: int,
    *,
    category: str = "",
    search: str = "",
    error: str | None = None,
) -> str:
    if not foods:
        hint = " Try clearing the filters." if (search or category) else ""
        table = f'<p class="muted">No foods found.{hint}</p>'
    else:
        rows = "".join(_food_row(food) for food in foods)
        table = f"""
        <table>
          <thead><tr><th></th><th>Name</th><th>Category</th><th>Calories</th>
          <th>P / C / F</th><th>Status</th><th>Actions</th></tr></thead>
          <tbody>{rows}</tbody>
        </table>
        <p class="muted">Showing {len(foods)} of {total} foods</p>"""
    return f"""
      <h1>Foods</h1>
      <p>
        <a class="button" href="/admin/foods/bulk">Bulk Upload</a>
        <a class="button" href="/admin/foods/new">+ Add Food</a>
      </p>
      {error_banner(error)}
      <form class="card" method="get" action="/admin/foods">
        <label for="search">Search</label>
        <input id="search" name="search" value="{_e(search)}"
               placeholder="Search by name, Hindi name, or keywords..." />
        {_select("Category", "category", FOOD_CATEGORIES, category, blank="All Categories")}
        <p><button type="submit">Apply</button>
        <a href="/admin/foods">Clear Filters</a></p>
      </form>
      <div class="card">{table}</div>"""


def _food_row(food: Food) -> str:
    if food.image_url:
        icon = f'<img class="thumb" src="{_e(food.image_url)}" alt="{_e(food.name)}" />'
    else:
        icon = _e(food.emoji or "\U0001f37d️")
    macros = (
        f"{_num(food.protein)} / {_num(food.carbs)} / {_num(food.fat)}"
        if food.has_macros
        else '<span class="muted">-</span>'
    )
    serving = (
        f'<div class="muted">{_e(food.serving_size)}</div>' if food.serving_size else ""
    )
    hindi = f'<div class="muted">{_e(food.name_hindi)}</div>' if food.name_hindi else ""
    return (
        f"<tr><td>{icon}</td><td>{_e(food.name)}{hindi}{serving}</td>"
        f'<td><span class="badge">{_e(food.category)}</span></td>'
        f"<td>{_num(food.calories)} kcal</td><td>{macros}</td>"
        f"<td>{_status(food.is_active)}</td>"
        f'<td><a href="/admin/foods/{url_segment(food.id)}/edit">Edit</a> '
        f'<a class="danger" href="/admin/foods/{url_segment(food.id)}/delete">'
        "Delete</a></td></tr>"
    )


def food_form_page(
    heading: str, action: str, values: Mapping[str, object], error: str | None = None
) -> str:
    return f"""
      <h1>{_e(heading)}</h1>
      <form class="card" method="post" action="{_e(action)}">
        {error_banner(error)}
        {_input("Food Name *", "name", values, required=True, placeholder="e.g., Brown Rice")}
        {_input("Hindi Name", "nameHindi", values)}
        {_select("Category *", "category", FOOD_CATEGORIES, values.get("category"))}
        {_input("Serving Size", "servingSize", values, placeholder="e.g., 100g, 1 cup")}
        {_input("Calories (kcal) *", "calories", values, input_type="number",
                required=True, extra='min="0" step="any"')}
        {_input("Protein (g)", "protein", values, input_type="number",
                extra='min="0" step="0.1"')}
        {_input("Carbs (g)", "carbs", values, input_type="number",
                extra='min="0" step="0.1"')}
        {_input("Fat (g)", "fat", values, input_type="number",
                extra='min="0" step="0.1"')}
        {_input("Fiber (g)", "fiber", values, input_type="number",
                extra='min="0" step="0.1"')}
        {_input("Emoji", "emoji", values)}
        {_input("Image URL", "imageUrl", values, input_type="url")}
        {_input("Search Terms", "searchTerms", values,
                placeholder="Comma-separated keywords")}
        {_input("Pairing Tags", "pairingTags", values)}
        {_checkbox("Active", "isActive", values)}
        <p><button type="submit">Save</button><a href="/admin/foods">Cancel</a></p>
      </form>"""


def bulk_upload_page(
    raw: str = "", error: str | None = None, message: str | None = None
) -> str:
    return f"""
      <h1>Bulk Upload Foods</h1>
      <div class="card">
        <p><strong>Note:</strong> Paste a JSON Array of food items below.</p>
        {error_banner(error)}{success_banner(message)}
        <form method="post" action="/admin/foods/bulk">
          <label for="payload">JSON Data</label>
          <textarea id="payload" name="payload" rows="14"
                    placeholder="{_e(SAMPLE_BULK_PAYLOAD)}">{_e(raw)}</textarea>
          <p><button type="submit">Upload Data</button>
          <a href="/admin/foods">Cancel</a></p>
        </form>
      </div>"""


# Exercises


def exercises_page(
    exercises: Sequence[Exercise],
    total: int,
    *,
    category: str = "",
    difficulty: str = "",
    search: str = "",
    error: str | None = None,
) -> str:
    if not exercises:
        table = '<p class="muted">No exercises found.</p>'
    else:
        rows = "".join(
            f"<tr><td>{_e(ex.name)}</td>"
            f'<td><span class="badge">{_e(ex.category)}</span></td>'
            f'<td><span class="badge">{_e(ex.difficulty)}</span></td>'
            f"<td>{_e(ex.default_sets or '-')}</td><td>{_status(ex.is_active)}</td>"
            f'<td><a href="/admin/exercises/{url_segment(ex.id)}/edit">Edit</a> '
            f'<a class="danger" href="/admin/exercises/{url_segment(ex.id)}/delete">'
            "Delete</a></td></tr>"
            for ex in exercises
        )
        table = f"""
        <table>
          <thead><tr><th>Name</th><th>Category</th><th>Difficulty</th>
          <th>Default Sets</th><th>Status</th><th>Actions</th></tr></thead>
          <tbody>{rows}</tbody>
        </table>
        <p class="muted">Showing {len(exercises)} of {total} exercises</p>"""
    return f"""
      <h1>Exercises</h1>
      <p><a class="button" href="/admin/exercises/new">+ Add Exercise</a></p>
      {error_banner(error)}
      <form class="card" method="get" action="/admin/exercises">
        <label for="search">Search</label>
        <input id="search" name="search" value="{_e(search)}"
               placeholder="Search exercises..." />
        {_select("Category", "category", EXERCISE_CATEGORIES, category,
                 blank="All Categories")}
        {_select("Difficulty", "difficulty", EXERCISE_DIFFICULTIES, difficulty,
                 blank="All Levels")}
        <p><button type="submit">Apply</button>
        <a href="/admin/exercises">Clear Filters</a></p>
      </form>
      <div class="card">{table}</div>"""


def exercise_form_page(
    heading: str, action: str, values: Mapping[str, object], error: str | None = None
) -> str:
    gif_url = values.get("gifUrl")
    preview = (
        f'<img class="thumb" src="{_e(gif_url)}" alt="Preview" />' if gif_url else ""
    )
    return f"""
      <h1>{_e(heading)}</h1>
      <form class="card" method="post" action="{_e(action)}">
        {error_banner(error)}
        {_input("Exercise Name *", "name", values, required=True,
                placeholder="e.g., Push-Ups")}
        {_select("Category *", "category", EXERCISE_CATEGORIES, values.get("category"))}
        {_select("Difficulty *", "difficulty", EXERCISE_DIFFICULTIES,
                 values.get("difficulty"))}
        {_input("GIF URL", "gifUrl", values, input_type="url",
                placeholder="https://example.com/exercise.gif")}
        {preview}
        {_input("Default Sets", "defaultSets", values,
                placeholder="e.g., 3 x 12 or 3 sets to failure")}
        {_textarea("Description", "description", values)}
        {_textarea("Instructions", "instructions", values)}
        {_checkbox("Active", "isActive", values)}
        <p><button type="submit">Save</button><a href="/admin/exercises">Cancel</a></p>
      </form>"""


# Users


def users_page(
    users: Sequence[AppUser], total: int, *, search: str = "", error: str | None = None
) -> str:
    if not users:
        table = '<p class="muted">No users found.</p>'
    else:
        rows = "".join(
            f'<tr><td><a href="/admin/users/{url_segment(user.id)}">'
            f"{_e(user.name)}</a></td>"
            f"<td>{_e(user.email)}</td><td>{_e(user.password_preview)}</td>"
            f"<td>{_e(user.gender or 'N/A')}</td><td>{_e(user.age or 'N/A')}</td>"
            f"<td>{_kg(user.current_weight)}</td><td>{_kg(user.target_weight)}</td>"
            f'<td><span class="badge">{_e(user.goal)}</span></td>'
            f"<td>{_e(_date(user.created_at))}</td>"
            f'<td><a class="danger" href="/admin/users/{url_segment(user.id)}/delete">'
            "Delete</a></td></tr>"
            for user in users
        )
        table = f"""
        <table>
          <thead><tr><th>Name</th><th>Email</th><th>Password</th><th>Gender</th>
          <th>Age</th><th>Weight</th><th>Target</th><th>Goal</th><th>Joined</th>
          <th>Actions</th></tr></thead>
          <tbody>{rows}</tbody>
        </table>"""
    return f"""
      <h1>Users Management</h1>
      <p class="muted">Total Users: {total}</p>
      {error_banner(error)}
      <form class="card" method="get" action="/admin/users">
        <input name="search" value="{_e(search)}"
               placeholder="Search by name or email..." />
      </form>
      <div class="card">{table}</div>"""


def user_detail_page(
    user: AppUser, *, message: str | None = None, error: str | None = None
) -> str:
    user_url = f"/admin/users/{url_segment(user.id)}"
    details = [
        ("Email", user.email),
        ("Password", user.password or "•" * 8),
        ("Age", user.age or "N/A"),
        ("Gender", user.gender or "N/A"),
        ("Height", f"{_num(user.height)} cm" if user.height else "-"),
        ("Current Weight", _kg(user.current_weight)),
        ("Target Weight", _kg(user.target_weight)),
        ("Goal", user.goal),
        ("Chest", _num(user.chest) if user.chest else "-"),
        ("Waist", _num(user.waist) if user.waist else "-"),
        ("Arms", _num(user.arms) if user.arms else "-"),
        ("Hips", _num(user.hips) if user.hips else "-"),
        ("Joined", _date(user.created_at)),
    ]
    rows = "".join(
        f"<tr><th>{_e(label)}</th><td>{_e(value)}</td></tr>" for label, value in details
    )
    return f"""
      <h1>{_e(user.name)}</h1>
      {error_banner(error)}{success_banner(message)}
      <div class="card"><table>{rows}</table></div>
      <form class="card" method="post" action="{user_url}/password">
        <label for="password">New temporary password</label>
        <input id="password" name="password" type="text" required />
        <p><button type="submit">Reset</button></p>
      </form>
      <p><a href="/admin/users">Back to users</a>
      <a class="danger" href="{user_url}/delete">Delete user</a></p>"""


# Announcements


def announcements_page(
    announcements: Sequence[Announcement],
    *,
    values: Mapping[str, object] | None = None,
    error: str | None = None,
) -> str:
    values = values or {"type": "info"}
    items = "".join(
        f'<div class="card"><span class="badge">{_e(anno.type)}</span>'
        f"<h3>{_e(anno.title)}</h3><p>{_e(anno.message)}</p>"
        f'<p class="muted">Expires: {_e(_date(anno.expires_at) or "Never")}</p>'
        f'<a class="danger" href="/admin/announcements/{url_segment(anno.id)}/delete">'
        "Delete</a></div>"
        for anno in announcements
    ) or '<p class="muted">No announcements yet.</p>'
    type_options = "".join(
        f'<option value="{kind}"{" selected" if values.get("type") == kind else ""}>'
        f"{_e(ANNOUNCEMENT_LABELS[kind])}</option>"
        for kind in ANNOUNCEMENT_TYPES
    )
    return f"""
      <h1>Announcements</h1>
      {error_banner(error)}
      <form class="card" method="post" action="/admin/announcements">
        <h2>New Announcement</h2>
        {_input("Title", "title", values, required=True)}
        {_textarea("Message", "message", values, required=True)}
        <label for="type">Type</label>
        <select id="type" name="type">{type_options}</select>
        {_input("Expires At", "expiresAt", values, input_type="date")}
        <p><button type="submit">Post Announcement</button></p>
      </form>
      {items}"""


# Promotions


def promotions_page(promotions: Sequence[Promotion], error: str | None = None) -> str:
    items = "".join(
        f'<div class="card"><img class="thumb" src="{_e(promo.image_url)}" alt="" />'
        f"<h3>{_e(promo.title or 'Untitled promotion')}</h3>"
        f"<p>{_safe_link(promo.external_link)}</p>"
        f'<p class="muted">Shown after {promo.delay_days} day(s) · '
        f"{'ACTIVE' if promo.is_active else 'INACTIVE'}</p>"
        f'<a href="/admin/promotions/{url_segment(promo.id)}/edit">Edit</a> '
        f'<a class="danger" href="/admin/promotions/{url_segment(promo.id)}/delete">'
        "Delete</a></div>"
        for promo in promotions
    ) or '<p class="muted">No promotions yet.</p>'
    return f"""
      <h1>Promotions</h1>
      <p><a class="button" href="/admin/promotions/new">+ New Promo</a></p>
      {error_banner(error)}
      {items}"""


def promotion_form_page(
    heading: str, action: str, values: Mapping[str, object], error: str | None = None
) -> str:
    return f"""
      <h1>{_e(heading)}</h1>
      <form class="card" method="post" action="{_e(action)}">
        {error_banner(error)}
        {_input("Title", "title", values)}
        {_input("Image URL *", "imageUrl", values, required=True)}
        {_input("External Link *", "externalLink", values, required=True)}
        {_input("Install Delay (days)", "delayDays", values, input_type="number",
                extra='min="0"')}
        {_checkbox("Active", "isActive", values)}
        <p><button type="submit">Save</button><a href="/admin/promotions">Cancel</a></p>
      </form>"""


# App updates


def updates_page(
    config: AppConfig,
    *,
    message: str | None = None,
    error: str | None = None,
    values: Mapping[str, object] | None = None,
) -> str:
    """Render the config form, prefilled from `values` when given."""
    if values is None:
        values = {
            "requiredVersion": config.required_version,
            "forceUpdate": config.force_update,
            "updateMessage": config.update_message,
            "updateUrl": config.update_url,
        }
    return f"""
      <h1>App Updates</h1>
      {success_banner(message)}{error_banner(error)}
      <form class="card" method="post" action="/admin/updates">
        {_input("Required Version", "requiredVersion", values, required=True,
                placeholder="1.0.0")}
        <p class="muted">Format: X.Y.Z (e.g., 1.0.0, 1.2.3)</p>
        {_checkbox("Force Update", "forceUpdate", values)}
        <p class="muted">When enabled, ALL users will be forced to update
        regardless of version</p>
        {_textarea("Update Message", "updateMessage", values)}
        {_input("Update URL", "updateUrl", values, input_type="url")}
        <p><button type="submit">Save Changes</button></p>
      </form>
      <div class="card">
        <p>Current required version: <strong>{_e(config.required_version)}</strong></p>
        <p>Force update: <strong>{"ENABLED" if config.force_update else "DISABLED"}</strong></p>
      </div>"""


# Approvals


def approvals_page(
    pending: PendingSubmissions, tab: str = "foods", error: str | None = None
) -> str:
    tabs = (
        f'<a href="/admin/approvals?tab=foods"{_active(tab == "foods")}>'
        f"Foods ({len(pending.foods)})</a> "
        f'<a href="/admin/approvals?tab=exercises"{_active(tab == "exercises")}>'
        f"Exercises ({len(pending.exercises)})</a>"
    )
    if tab == "exercises":
        cards = [
            (
                ex.id,
                ex.name,
                f"{ex.category} · {ex.difficulty}"
                + (f" · {', '.join(ex.target_muscles)}" if ex.target_muscles else ""),
            )
            for ex in pending.exercises
        ]
    else:
        cards = [
            (food.id, food.name, f"{food.category} · {_num(food.calories)} kcal")
            for food in pending.foods
        ]
    items = "".join(
        f'<div class="card"><h3>{_e(name)}</h3><p class="muted">{_e(summary)}</p>'
        f'<a href="/admin/approvals/{tab}/{url_segment(item_id)}/approve">Approve</a> '
        '<a class="danger" '
        f'href="/admin/approvals/{tab}/{url_segment(item_id)}/reject">Reject</a></div>'
        for item_id, name, summary in cards
    ) or '<p class="muted">No pending submissions.</p>'
    return f"""
      <h1>Approvals</h1>
      <p class="muted">Review user submissions before adding them to the global
      database.</p>
      {error_banner(error or pending.error)}
      <p>{tabs}</p>
      {items}"""


# Shared


def confirm_page(question: str, action: str, cancel_url: str) -> str:
    """Blocking confirmation; only an explicit yes performs the action."""
    return f"""
      <div class="card">
        <h1>Please confirm</h1>
        <p>{_e(question)}</p>
        <form method="post" action="{_e(action)}">
          <button type="submit" name="confirm" value="yes">Yes</button>
          <button type="submit" name="confirm" value="no">Cancel</button>
        </form>
        <p><a href="{_e(cancel_url)}">Back</a></p>
      </div>"""


def not_found_page(message: str, back_url: str) -> str:
    return f"""
      {error_banner(message)}
      <p><a href="{_e(back_url)}">Back</a></p>"""


def _input(  # noqa: PLR0913
    label: str,
    name: str,
    values: Mapping[str, object],
    *,
    input_type: str = "text",
    required: bool = False,
    placeholder: str = "",
    extra: str = "",
) -> str:
    value = values.get(name)
    if input_type == "number":
        shown = _num(value) if isinstance(value, int | float) else _e(value)
    else:
        shown = _e(value)
    attrs = " required" if required else ""
    if placeholder:
        attrs += f' placeholder="{_e(placeholder)}"'
    if extra:
        attrs += f" {extra}"
    return (
        f'<label for="{name}">{_e(label)}</label>'
        f'<input id="{name}" name="{name}" type="{input_type}" value="{shown}"{attrs} />'
    )


def _textarea(
    label: str, name: str, values: Mapping[str, object], *, required: bool = False
) -> str:
    attrs = " required" if required else ""
    return (
        f'<label for="{name}">{_e(label)}</label>'
        f'<textarea id="{name}" name="{name}" rows="3"{attrs}>'
        f"{_e(values.get(name))}</textarea>"
    )


def _checkbox(label: str, name: str, values: Mapping[str, object]) -> str:
    checked = " checked" if _truthy(values.get(name)) else ""
    return (
        f'<label><input type="checkbox" name="{name}" value="true"{checked} /> '
        f"{_e(label)}</label>"
    )


def _select(
    label: str,
    name: str,
    options: Iterable[str],
    selected: object,
    *,
    blank: str | None = None,
) -> str:
    choices = []
    if blank is not None:
        choices.append(f'<option value="">{_e(blank)}</option>')
    for option in options:
        mark = " selected" if option == selected else ""
        choices.append(
            f'<option value="{_e(option)}"{mark}>{_e(option.capitalize())}</option>'
        )
    return (
        f'<label for="{name}">{_e(label)}</label>'
        f'<select id="{name}" name="{name}">{"".join(choices)}</select>'
    )


def _safe_link(url: str) -> str:
    """Link only web URLs; anything else is shown as plain text."""
    if urlsplit(url).scheme.lower() in {"http", "https"}:
        return f'<a href="{_e(url)}" rel="noopener">{_e(url)}</a>'
    return _e(url)


def _status(active: bool) -> str:
    return f'<span class="badge">{"Active" if active else "Inactive"}</span>'


def _active(flag: bool) -> str:
    return ' class="active"' if flag else ""


def _truthy(value: object) -> bool:
    if isinstance(value, str):
        return value.lower() in {"true", "on", "1", "yes"}
    return bool(value)


def _kg(value: float | None) -> str:
    return f"{_num(value)} kg" if value else "-"


def _date(value: str | None) -> str:
    if not value:
        return ""
    return value.split("T", maxsplit=1)[0]


def _num(value: object) -> str:
    if value is None:
        return "0"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def url_segment(value: object) -> str:
    """Percent-encode a record id as a single URL path segment."""
    return quote("" if value is None else str(value), safe="")


def _e(value: object) -> str:
    return escape("" if value is None else str(value))
