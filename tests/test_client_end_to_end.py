"""End-to-end: the client controller driving the real API over an in-process ASGI transport."""

import asyncio
import unittest

import httpx

from api_case import DEFAULT_PASSWORD, ApiTestCase
from medicine_cabinet.client import actions
from medicine_cabinet.client.api import CabinetApiClient
from medicine_cabinet.client.controller import CabinetController
from medicine_cabinet.client.render import CABINET, SINGLE_STRAIN, render_page
from medicine_cabinet.client.state import View


class TestClientAgainstApi(ApiTestCase):
    def _controller(self) -> CabinetController:
        client = httpx.AsyncClient(
            transport=httpx.ASGITransport(app=self.app), base_url="http://testserver"
        )
        return CabinetController(CabinetApiClient(client=client))

    def test_register_build_cabinet_comment_and_logout(self) -> None:
        seed_token = self.register_and_login("curator")
        self.create_strain(seed_token, "Blue Dream", type="hybrid")
        self.create_strain(seed_token, "Durban Poison", type="sativa")

        async def scenario() -> None:
            controller = self._controller()
            try:
                snap = await controller.dispatch(
                    actions.Register("alice", DEFAULT_PASSWORD, DEFAULT_PASSWORD)
                )
                self.assertIsNone(snap.error)
                self.assertEqual(snap.view, View.CABINET)
                self.assertEqual([s.name for s in snap.strains], ["Blue Dream", "Durban Poison"])
                self.assertTrue(controller.refresher.running)

                snap = await controller.dispatch(actions.AddStrainToCabinet(1))
                self.assertEqual([s.name for s in snap.user_strains], ["Durban Poison"])
                self.assertIn("Strains in Cabinet: 1", render_page(snap).fragments[CABINET])

                requests_before = len(snap.user_strains)
                snap = await controller.dispatch(actions.AddStrainToCabinet(1))
                self.assertEqual(snap.error, "This strain is already in your cabinet")
                self.assertEqual(len(snap.user_strains), requests_before)

                snap = await controller.dispatch(actions.ShowStrainDetails(0))
                snap = await controller.dispatch(actions.AddComment("Bright and clear"))
                self.assertEqual(
                    [(c.content, c.author) for c in snap.current_strain.comments],
                    [("Bright and clear", "alice")],
                )
                html = render_page(snap).fragments[SINGLE_STRAIN]
                self.assertIn('<h3 class="sativa">Sativa</h3>', html)
                self.assertIn("js-remove-comment-btn", html)

                snap = await controller.dispatch(actions.RemoveComment(0))
                self.assertEqual(snap.current_strain.comments, [])

                snap = await controller.dispatch(actions.RefreshToken())
                self.assertIsNone(snap.error)

                snap = await controller.dispatch(actions.ShowCabinet())
                snap = await controller.dispatch(actions.RemoveStrainFromCabinet(0))
                self.assertEqual(snap.user_strains, ())

                snap = await controller.dispatch(actions.Logout())
                self.assertFalse(snap.authenticated)
                self.assertFalse(controller.refresher.running)
            finally:
                controller.refresher.stop()
                await controller.api.aclose()

        asyncio.run(scenario())

    def test_duplicate_registration_message(self) -> None:
        self.assertEqual(self.register("alice").status_code, 201)

        async def scenario():
            controller = self._controller()
            try:
                return await controller.dispatch(
                    actions.Register("alice", DEFAULT_PASSWORD, DEFAULT_PASSWORD)
                )
            finally:
                await controller.api.aclose()

        snap = asyncio.run(scenario())
        self.assertEqual(snap.error, "userName already taken (userName)")
        self.assertFalse(snap.authenticated)


if __name__ == "__main__":
    unittest.main()
