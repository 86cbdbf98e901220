from unittest import TestCase

from artledger.execution.events import LogEvent
from artledger.execution.runtime import Runtime

TransferEvent = LogEvent('Transfer', {
    'from': {'type': str, 'idx': True},
    'to': {'type': str, 'idx': True},
    'token_id': {'type': int, 'idx': True}
})


class TestLogEvent(TestCase):
    def setUp(self):
        self.rt = Runtime()

    def test_emit_buffers_on_runtime(self):
        TransferEvent(self.rt, {'from': 'stu', 'to': 'raghu', 'token_id': 1})

        self.assertEqual(self.rt.events, [
            {'event': 'Transfer', 'data': {'from': 'stu', 'to': 'raghu', 'token_id': 1}}
        ])

    def test_missing_param_fails(self):
        with self.assertRaises(AssertionError):
            TransferEvent(self.rt, {'from': 'stu', 'token_id': 1})

        self.assertEqual(self.rt.events, [])

    def test_extra_param_fails(self):
        with self.assertRaises(AssertionError):
            TransferEvent(self.rt, {'from': 'stu', 'to': 'raghu', 'token_id': 1, 'memo': 'hi'})

    def test_wrong_type_fails(self):
        with self.assertRaises(AssertionError):
            TransferEvent(self.rt, {'from': 'stu', 'to': 'raghu', 'token_id': '1'})

    def test_indexed(self):
        self.assertEqual(TransferEvent.indexed(), ['from', 'to', 'token_id'])

    def test_empty_name_rejected(self):
        with self.assertRaises(AssertionError):
            LogEvent('', {})


class TestRuntime(TestCase):
    def test_set_up_sets_context_and_env(self):
        rt = Runtime()
        rt.set_up(sender='stu', contract_name='art_ledger', environment={'now': 1, 'block_num': 7})

        self.assertEqual(rt.context.caller, 'stu')
        self.assertEqual(rt.context.signer, 'stu')
        self.assertEqual(rt.context.this, 'art_ledger')
        self.assertEqual(rt.now, 1)
        self.assertEqual(rt.block_num, 7)

    def test_environment_is_copied(self):
        env = {'block_num': 7}
        rt = Runtime()
        rt.set_up(sender='stu', contract_name='art_ledger', environment=env)

        env['block_num'] = 8

        self.assertEqual(rt.block_num, 7)

    def test_block_num_defaults_to_zero(self):
        rt = Runtime()
        rt.set_up(sender='stu', contract_name='art_ledger', environment={})

        self.assertEqual(rt.block_num, 0)
        self.assertIsNone(rt.now)

    def test_clean_up(self):
        rt = Runtime()
        rt.set_up(sender='stu', contract_name='art_ledger', environment={'block_num': 7})
        rt.emit('Transfer', {})
        rt.clean_up()

        self.assertIsNone(rt.context.caller)
        self.assertEqual(rt.events, [])
        self.assertEqual(rt.env, {})
