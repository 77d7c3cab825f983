"""Build a JSON <-> model pipeline and run it in both directions."""

from __future__ import annotations

import logging

from pydantic import BaseModel

from valuetransformer import (
    Result,
    Transformer,
    combine,
    flip,
    json_codec,
    lift_from_optional_input,
    lift_to_collection,
    model_codec,
)

logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


class Order(BaseModel):
    sku: str
    quantity: int


parse_int = Transformer.from_callable(int, catch=(ValueError,))
format_int = Transformer(lambda value: Result.Success(str(value)))
string_int = combine(parse_int, format_int)


def main() -> None:
    print("forward '1'      ->", string_int.forward_transform("1"))
    print("forward '1.5'    ->", string_int.forward_transform("1.5"))
    print("flip forward 3   ->", flip(string_int).forward_transform(3))

    quantity = lift_from_optional_input(string_int, 0)
    print("optional None    ->", quantity.forward_transform(None))

    quantities = lift_to_collection(string_int)
    print("collection       ->", quantities.forward_transform(["11", "12"]))
    print("collection fail  ->", quantities.forward_transform(["11", "12.5"]))

    orders = json_codec() >> model_codec(Order)
    order = orders.forward_transform('{"sku": "A-1", "quantity": 2}')
    print("decoded order    ->", order)
    print("encoded order    ->", orders.reverse_transform(order.unwrap()))
    print("invalid order    ->", orders.forward_transform('{"sku": "A-1"}'))


if __name__ == "__main__":
    main()
