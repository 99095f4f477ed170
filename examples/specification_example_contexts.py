"""Reusable contexts composed through inheritance.

Run with ``python examples/specification_example_contexts.py``.
"""

import asyncio

from specifications import Specification, because, destroy, establish


class an_inventory(Specification):
    def establish(self):
        self.stock = {"apples": 3}

    def destroy(self):
        self.stock.clear()


class a_warmed_up_cache(an_inventory):
    async def establish(self):
        await asyncio.sleep(0.01)
        self.cache = dict(self.stock)


class when_taking_an_apple(a_warmed_up_cache):
    def establish(self):
        self.taken = 0

    def because(self):
        self.stock["apples"] -= 1
        self.taken += 1


async def main() -> None:
    spec = when_taking_an_apple()
    await establish(spec)
    await because(spec)
    assert spec.stock["apples"] == 2
    assert spec.cache == {"apples": 3}
    await destroy(spec)
    print("ok")


if __name__ == "__main__":
    asyncio.run(main())
