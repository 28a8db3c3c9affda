import asyncio
import unittest

from auction_ledger.identity import (
    StaticCallerIdentity,
    RequestCallerIdentity,
    CallerNotBoundError,
)
from tests.test_support import LedgerTestCase, generate_address


class StaticCallerIdentityTestCase(LedgerTestCase):
    def test_caller(self):
        address = generate_address()
        self.assertEqual(address, StaticCallerIdentity(address).caller)


class RequestCallerIdentityTestCase(LedgerTestCase):
    def test_bind(self):
        identity = RequestCallerIdentity()
        caller_1 = generate_address()
        caller_2 = generate_address()

        with self.assertRaises(CallerNotBoundError):
            identity.caller

        with identity.bind(caller_1):
            self.assertEqual(caller_1, identity.caller)
            with identity.bind(caller_2):
                self.assertEqual(caller_2, identity.caller)
            self.assertEqual(caller_1, identity.caller)

        with self.assertRaises(CallerNotBoundError):
            identity.caller

    def test_binding_is_released_on_error(self):
        identity = RequestCallerIdentity()
        with self.assertRaises(ValueError):
            with identity.bind(generate_address()):
                raise ValueError
        with self.assertRaises(CallerNotBoundError):
            identity.caller

    def test_identities_are_independent(self):
        identity_1 = RequestCallerIdentity()
        identity_2 = RequestCallerIdentity()
        with identity_1.bind(generate_address()):
            with self.assertRaises(CallerNotBoundError):
                identity_2.caller

    def test_bindings_are_per_task(self):
        identity = RequestCallerIdentity()

        async def request(caller):
            with identity.bind(caller):
                await asyncio.sleep(0.01)
                return identity.caller

        async def run_requests(callers):
            return await asyncio.gather(*(request(caller) for caller in callers))

        callers = [generate_address() for _ in range(5)]
        self.assertEqual(callers, asyncio.run(run_requests(callers)))


if __name__ == "__main__":
    unittest.main()
