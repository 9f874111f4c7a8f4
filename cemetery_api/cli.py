"""Cemetery Records API CLI tool."""

from typing import Optional

import typer

from cemetery_api.core.paths import route_key
from cemetery_api.models.role import Role
from cemetery_api.services.permission_service import permission_service

app = typer.Typer(name="cemetery-api", help="Cemetery Records API CLI")


def _parse_role(value: str) -> Role:
    role = Role.parse(value)
    if role is None:
        choices = ", ".join(r.value for r in permission_service.hierarchy.roles())
        raise typer.BadParameter(f"Unknown role '{value}'. Choose from: {choices}")
    return role


@app.command("matrix")
def show_matrix(
    role: Optional[str] = typer.Option(None, help="Only show routes this role may call"),
):
    """Print the route permission matrix."""
    parsed = _parse_role(role) if role else None
    for key, roles in permission_service.export_matrix()["routes"].items():
        if parsed and not permission_service.has_permission(parsed, roles):
            continue
        typer.echo(f"  {key:<40} {', '.join(roles)}")


@app.command("check")
def check_route(
    role: str = typer.Argument(..., help="Role to evaluate"),
    method: str = typer.Argument(..., help="HTTP method"),
    template: str = typer.Argument(..., help="Route template, e.g. /gravestones/:id"),
):
    """Check whether a role may call a route template."""
    if not template.startswith("/"):
        raise typer.BadParameter("Route template must start with '/'")
    parsed = _parse_role(role)
    required = permission_service.required_roles_for(method, template)
    matched = permission_service.resolve(method, template) is not None
    allowed = permission_service.has_permission(parsed, required)

    typer.echo(f"{route_key(method, template)}")
    typer.echo(f"  required: {', '.join(permission_service.role_names(required))}"
               + ("" if matched else " (default)"))
    typer.echo(f"  {parsed.value}: {'allow' if allowed else 'deny'}")
    if not allowed:
        raise typer.Exit(code=1)


@app.command("can")
def can(
    role: str = typer.Argument(..., help="Role to evaluate"),
    resource: str = typer.Argument(..., help="Resource name, e.g. gravestone"),
    action: str = typer.Argument(..., help="Action name, e.g. delete"),
):
    """Check a resource/action capability for a role."""
    parsed = _parse_role(role)
    allowed = permission_service.check_resource_action(parsed, resource, action)
    typer.echo(f"{resource}:{action} {parsed.value}: {'allow' if allowed else 'deny'}")
    if not allowed:
        raise typer.Exit(code=1)


@app.command("serve")
def serve(
    host: str = typer.Option("0.0.0.0", help="Host"),
    port: int = typer.Option(8000, help="Port"),
    reload: bool = typer.Option(False, help="Auto-reload"),
):
    """Start the FastAPI server."""
    import uvicorn
    uvicorn.run("cemetery_api.main:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    app()
