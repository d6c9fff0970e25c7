#!/usr/bin/env python3
import aws_cdk as cdk
from stacks.event_details_stack import EventDetailsStack

app = cdk.App()

EventDetailsStack(
    app,
    "EventDetailsStack",
    env=cdk.Environment(
        account=app.node.try_get_context("account"),
        region=app.node.try_get_context("region") or "ap-northeast-1",
    ),
)

app.synth()
