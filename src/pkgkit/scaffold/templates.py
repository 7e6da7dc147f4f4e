"""Text templates for generated package files."""

from __future__ import annotations

TOOLS_VERSION = "5.9"

GITIGNORE = """.DS_Store
/.build
/Packages
xcuserdata/
DerivedData/
.swiftpm/configuration/registries.json
.swiftpm/xcode/package.xcworkspace/contents.xcworkspacedata
.netrc
"""

MANIFEST_HEADER = """// swift-tools-version: {tools_version}
// The swift-tools-version declares the minimum version of Swift required to build this package.

import PackageDescription
"""

EMPTY_MANIFEST = """
let package = Package(
    name: "{name}"
)
"""

LIBRARY_MANIFEST = """
let package = Package(
    name: "{name}",
    products: [
        .library(
            name: "{name}",
            targets: ["{module}"]),
    ],
    targets: [
        .target(
            name: "{module}"),
        .testTarget(
            name: "{module}Tests",
            dependencies: ["{module}"]),
    ]
)
"""

EXECUTABLE_MANIFEST = """
let package = Package(
    name: "{name}",
    targets: [
        .executableTarget(
            name: "{module}"),
        .testTarget(
            name: "{module}Tests",
            dependencies: ["{module}"]),
    ]
)
"""

TOOL_MANIFEST = """
let package = Package(
    name: "{name}",
    dependencies: [
        .package(url: "https://github.com/apple/swift-argument-parser.git", from: "1.2.0"),
    ],
    targets: [
        .executableTarget(
            name: "{module}",
            dependencies: [
                .product(name: "ArgumentParser", package: "swift-argument-parser"),
            ]),
        .testTarget(
            name: "{module}Tests",
            dependencies: ["{module}"]),
    ]
)
"""

PLUGIN_MANIFEST = """
let package = Package(
    name: "{name}",
    products: [
        .plugin(
            name: "{name}",
            targets: ["{module}"]),
    ],
    targets: [
        .plugin(
            name: "{module}",
            capability: {capability}
        ),
    ]
)
"""

MACRO_MANIFEST = """
import CompilerPluginSupport

let package = Package(
    name: "{name}",
    platforms: [.macOS(.v10_15), .iOS(.v13)],
    products: [
        .library(
            name: "{name}",
            targets: ["{module}"]),
    ],
    dependencies: [
        .package(url: "https://github.com/apple/swift-syntax.git", from: "509.0.0"),
    ],
    targets: [
        .macro(
            name: "{module}Macros",
            dependencies: [
                .product(name: "SwiftSyntaxMacros", package: "swift-syntax"),
                .product(name: "SwiftCompilerPlugin", package: "swift-syntax"),
            ]),
        .target(name: "{module}", dependencies: ["{module}Macros"]),
        .testTarget(
            name: "{module}Tests",
            dependencies: [
                "{module}Macros",
                .product(name: "SwiftSyntaxMacrosTestSupport", package: "swift-syntax"),
            ]),
    ]
)
"""

BUILD_TOOL_CAPABILITY = ".buildTool()"
COMMAND_CAPABILITY = """.command(intent: .custom(
                verb: "{name}",
                description: "prints hello world"
            ))"""

LIBRARY_SOURCE = """// The Swift Programming Language
// https://docs.swift.org/swift-book
"""

EXECUTABLE_SOURCE = """// The Swift Programming Language
// https://docs.swift.org/swift-book

print("Hello, world!")
"""

TOOL_SOURCE = """// The Swift Programming Language
// https://docs.swift.org/swift-book
//
// Swift Argument Parser
// https://swiftpackageindex.com/apple/swift-argument-parser/documentation

import ArgumentParser

@main
struct {module}: ParsableCommand {{
    mutating func run() throws {{
        print("Hello, world!")
    }}
}}
"""

MACRO_SOURCE = """// The Swift Programming Language
// https://docs.swift.org/swift-book

@freestanding(expression)
public macro stringify<T>(_ value: T) -> (T, String) = #externalMacro(module: "{module}Macros", type: "StringifyMacro")
"""

MACRO_IMPLEMENTATION = """import SwiftCompilerPlugin
import SwiftSyntax
import SwiftSyntaxBuilder
import SwiftSyntaxMacros

public struct StringifyMacro: ExpressionMacro {{
    public static func expansion(
        of node: some FreestandingMacroExpansionSyntax,
        in context: some MacroExpansionContext
    ) -> ExprSyntax {{
        guard let argument = node.argumentList.first?.expression else {{
            fatalError("compiler bug: the macro does not have any arguments")
        }}

        return "(\\(argument), \\(literal: argument.description))"
    }}
}}

@main
struct {module}Plugin: CompilerPlugin {{
    let providingMacros: [Macro.Type] = [
        StringifyMacro.self,
    ]
}}
"""

BUILD_TOOL_PLUGIN_SOURCE = """import PackagePlugin

@main
struct {module}: BuildToolPlugin {{
    func createBuildCommands(context: PluginContext, target: Target) async throws -> [Command] {{
        return []
    }}
}}
"""

COMMAND_PLUGIN_SOURCE = """import PackagePlugin

@main
struct {module}: CommandPlugin {{
    func performCommand(context: PluginContext, arguments: [String]) async throws {{
        print("Hello, World!")
    }}
}}
"""

TEST_SOURCE = """import XCTest
@testable import {module}

final class {module}Tests: XCTestCase {{
    func testExample() throws {{
        // XCTest Documentation
        // https://developer.apple.com/documentation/xctest
    }}
}}
"""

DOCC_ARTICLE = """# ``{module}``

Summary

## Overview

Text

## Topics

### Group

- ``Symbol``
"""
