"""CLI commands for the pet inventory."""

from __future__ import annotations

import click

from petstore.application.dto import PetDTO, PetSpec
from petstore.domain.exceptions import PetStoreError
from petstore.domain.model.pet import PetRecord
from petstore.domain.model.pet_type import PetType
from petstore.infrastructure.bootstrap import inventory_service

_pet_type_option = click.option(
    "--type",
    "pet_type",
    required=True,
    type=click.Choice([t.value for t in PetType], case_sensitive=False),
    callback=lambda ctx, param, value: PetType.parse(value),
    help="Pet type, e.g. DOG.",
)
_pet_id_option = click.option("--id", "pet_id", required=True, type=int, help="Pet ID.")


def _payload_options(func):
    func = click.option("--breed", default="", help="Breed (optional).")(func)
    func = click.option("--price", required=True, help="Price (e.g. 15.00).")(func)
    func = click.option("--name", required=True, help="Pet name.")(func)
    return func


def _echo_table(pets: list[PetRecord]) -> None:
    click.echo(f"{'Type':<8} {'ID':>4}  {'Name':<20} {'Breed':<20} {'Price':>10}")
    click.echo("-" * 68)
    for pet in pets:
        dto = PetDTO.from_record(pet)
        click.echo(
            f"{dto.pet_type:<8} {dto.pet_id:>4}  {dto.name:<20} {dto.breed:<20} {dto.price:>10}"
        )


@click.command("list")
def inventory_list() -> None:
    """List every pet in the store."""
    try:
        pets = inventory_service().get_inventory()
    except PetStoreError as exc:
        raise click.ClickException(str(exc))

    if not pets:
        click.echo("No pets in inventory.")
        return
    _echo_table(pets)


@click.command("show")
@_pet_type_option
@_pet_id_option
def inventory_show(pet_type: PetType, pet_id: int) -> None:
    """Show a single pet."""
    try:
        pet = inventory_service().find_by_type_and_id(pet_type, pet_id)
    except PetStoreError as exc:
        raise click.ClickException(str(exc))

    _echo_table([pet])


@click.command("by-type")
@_pet_type_option
def inventory_by_type(pet_type: PetType) -> None:
    """List pets of one type, ordered by ID."""
    try:
        pets = inventory_service().get_by_type(pet_type)
    except PetStoreError as exc:
        raise click.ClickException(str(exc))

    _echo_table(pets)


@click.command("add")
@_pet_type_option
@_payload_options
def inventory_add(pet_type: PetType, name: str, price: str, breed: str) -> None:
    """Add a new pet; the store assigns its ID."""
    try:
        payload = PetSpec(name=name, price=price, breed=breed).to_record(pet_type)
        pet = inventory_service().add_inventory(pet_type, payload)
    except PetStoreError as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Added {pet} '{pet.name}' at {pet.price}")


@click.command("remove")
@_pet_type_option
@_pet_id_option
def inventory_remove(pet_type: PetType, pet_id: int) -> None:
    """Remove a pet from the store."""
    try:
        pet = inventory_service().remove_inventory(pet_type, pet_id)
    except PetStoreError as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Removed {pet} '{pet.name}'")


@click.command("update")
@_pet_type_option
@_pet_id_option
@_payload_options
def inventory_update(
    pet_type: PetType, pet_id: int, name: str, price: str, breed: str
) -> None:
    """Replace a pet's details, adding it if it does not exist."""
    try:
        payload = PetSpec(name=name, price=price, breed=breed).to_record(pet_type)
        pet = inventory_service().update_inventory(pet_type, pet_id, payload)
    except PetStoreError as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Saved {pet} '{pet.name}' at {pet.price}")
