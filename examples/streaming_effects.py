"""
Example: Streaming effects and payments

This example shows the generic and typed streaming calls, cancellation after
a deadline, and reconnecting after the server closes the stream.
"""

import asyncio

from horizon_sdk import (
    CancellationToken,
    EffectRequest,
    HorizonClient,
    ReconnectConfig,
)


async def example_generic_stream():
    """Stream every new effect for 60 seconds."""
    print("=== Generic Effect Stream ===\n")

    token = CancellationToken()
    # Stop streaming after 60 seconds
    token.cancel_after(60)

    async with HorizonClient.public() as client:
        def handle(effect):
            print(f"{effect.paging_token} {effect.type} account={effect.account}")

        await client.stream(EffectRequest(cursor="now"), handle, token)

    print("\nStream stopped")


async def example_typed_payments():
    """Stream payments for one account and stop after the first three."""
    print("\n=== Payments for One Account ===\n")

    token = CancellationToken()
    received = []

    async def handle(payment):
        received.append(payment)
        print(f"{payment.type}: {payment.model_dump(exclude={'links'})}")
        if len(received) == 3:
            token.cancel("enough payments")

    async with HorizonClient.testnet() as client:
        await client.stream_payments(
            handle,
            cancellation=token,
            reconnect=ReconnectConfig(max_reconnects=5),
            for_account="GAIH3ULLFQ4DGSECF2AR555KZ4KNDGEKN4AFI4SU2M7B43MGK3QJZNSR",
        )

    print(f"\nReceived {len(received)} payments")


async def main():
    """Run all examples."""
    examples = [
        example_generic_stream,
        example_typed_payments,
    ]

    for example in examples:
        await example()
        print("\n" + "="*50 + "\n")


if __name__ == "__main__":
    asyncio.run(main())
