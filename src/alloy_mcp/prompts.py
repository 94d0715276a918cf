"""MCP prompts: step-by-step alloy walkthroughs."""

from fastmcp import FastMCP
from mcp.types import PromptMessage, TextContent


def _exchange(question: str, answer: str) -> list[PromptMessage]:
    return [
        PromptMessage(role="user", content=TextContent(type="text", text=question)),
        PromptMessage(role="assistant", content=TextContent(type="text", text=answer)),
    ]


BUILD_TRANSACTION = """\
Here's a step-by-step guide for building and sending a transaction with alloy:

## Step 1: Set Up Provider

```rust
use alloy::providers::ProviderBuilder;
use alloy::signers::local::PrivateKeySigner;
use alloy::network::EthereumWallet;

let signer: PrivateKeySigner = "0xYOUR_PRIVATE_KEY".parse()?;
let wallet = EthereumWallet::from(signer);

let provider = ProviderBuilder::new()
    .wallet(wallet)
    .connect("https://your-rpc-url")
    .await?;
```

## Step 2: Build TransactionRequest

```rust
use alloy::rpc::types::TransactionRequest;
use alloy::primitives::U256;

let tx = TransactionRequest::default()
    .with_to(recipient_address)
    .with_value(U256::from(1_000_000_000_000_000_000u64)); // 1 ETH
```

Gas, nonce, and chain_id are filled automatically by default fillers.

## Step 3: Send Transaction

```rust
let pending = provider.send_transaction(tx).await?;
let tx_hash = pending.tx_hash();
println!("Transaction hash: {tx_hash}");
```

## Step 4: Wait for Receipt

```rust
let receipt = pending.get_receipt().await?;
if receipt.status() {
    println!("Transaction succeeded!");
} else {
    println!("Transaction reverted");
}
```

**Key resources:**
- `alloy://rpc/transaction-request` - TransactionRequest builder methods
- `alloy://provider/setup` - Provider configuration
- `alloy://provider/fillers` - How gas/nonce/chain_id are auto-filled
- `alloy://signers/signing-guide` - Signer setup
"""

SETUP_CONTRACT_BINDINGS = """\
Here's how to set up contract bindings with alloy's sol! macro:

## Step 1: Define the Contract Interface

```rust
use alloy::sol;

sol! {
    #[sol(rpc)]
    contract MyContract {
        event Transfer(address indexed from, address indexed to, uint256 value);

        function balanceOf(address owner) external view returns (uint256);
        function transfer(address to, uint256 amount) external returns (bool);
    }
}
```

**Important:** `#[sol(rpc)]` is required to generate the contract instance with
`.call()`/`.send()` methods.

## Step 2: Create Contract Instance

```rust
let contract = MyContract::new(contract_address, &provider);
```

## Step 3: Read Data (call)

```rust
let balance: U256 = contract.balanceOf(owner_address).call().await?;
```

`.call()` simulates the call (free, no state change).

## Step 4: Write Data (send)

```rust
let pending = contract.transfer(recipient, amount).send().await?;
let receipt = pending.get_receipt().await?;
```

`.send()` submits a transaction (costs gas, changes state). Requires a wallet on the provider.

## Step 5: Decode Events

```rust
use alloy::sol_types::SolEvent;

for log in receipt.inner.logs() {
    if let Ok(transfer) = MyContract::Transfer::decode_log(&log.inner) {
        println!("{} -> {}: {}", transfer.from, transfer.to, transfer.value);
    }
}
```

**Key resources:**
- `alloy://sol-macro/contract-bindings` - Full sol! macro reference
- `alloy://sol-macro/sol-types` - ABI encoding/decoding
- `alloy://consensus/events` - Event decoding patterns
"""

SETUP_SIGNING = """\
Here's how to set up signing with alloy:

## Step 1: Create a Signer

```rust
use alloy::signers::local::PrivateKeySigner;

// From hex string
let signer: PrivateKeySigner = "0xac0974...".parse()?;

// Random (for testing)
let signer = PrivateKeySigner::random();

let address = signer.address();
```

## Step 2: Wrap in Wallet (for provider)

```rust
use alloy::network::EthereumWallet;

let wallet = EthereumWallet::from(signer.clone());
let provider = ProviderBuilder::new()
    .wallet(wallet)
    .connect(url)
    .await?;
```

## Step 3: Sign a Message (EIP-191)

```rust
use alloy::signers::Signer;

let signature = signer.sign_message(b"Hello, world!").await?;
```

## Step 4: Sign Typed Data (EIP-712)

```rust
use alloy::sol;
use alloy::sol_types::{eip712_domain, SolStruct};

sol! {
    struct MyMessage {
        address sender;
        uint256 amount;
        uint256 nonce;
    }
}

let domain = eip712_domain! {
    name: "MyProtocol",
    version: "1",
    chain_id: 1,
    verifying_contract: contract_address,
};

let message = MyMessage { sender: signer.address(), amount: U256::from(1000), nonce: U256::ZERO };
let hash = message.eip712_signing_hash(&domain);
let signature = signer.sign_hash(&hash).await?;
```

**Key resources:**
- `alloy://signers/signing-guide` - Full signer reference
- `alloy://sol-macro/sol-types` - SolStruct for EIP-712
- `alloy://primitives/core-types` - Address, B256, U256 types
"""


def register(mcp: FastMCP) -> None:
    """Register walkthrough prompts with the MCP server."""

    @mcp.prompt(
        name="build_transaction",
        description="Step-by-step guide: provider setup, TransactionRequest, send, receipt",
    )
    def build_transaction() -> list[PromptMessage]:
        return _exchange("Help me build and send an Ethereum transaction using alloy.", BUILD_TRANSACTION)

    @mcp.prompt(
        name="setup_contract_bindings",
        description="Guide: sol! macro, ContractInstance, call/send pattern",
    )
    def setup_contract_bindings() -> list[PromptMessage]:
        return _exchange(
            "Help me set up contract bindings using alloy's sol! macro.",
            SETUP_CONTRACT_BINDINGS,
        )

    @mcp.prompt(
        name="setup_signing",
        description="Guide: signer creation, wallet, signing flow including EIP-712",
    )
    def setup_signing() -> list[PromptMessage]:
        return _exchange(
            "Help me set up signing with alloy, including EIP-712 typed data.",
            SETUP_SIGNING,
        )
