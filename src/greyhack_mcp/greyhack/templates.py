"""GreyScript source templates for the script generator.

Templates use ``string.Template`` placeholders. A literal dollar sign in the
GreyScript body is written as ``$$``.
"""

from string import Template

PORT_SCANNER = Template(
    """// Grey Hack Port Scanner v1.0
// For game version ${version}
// Scans a target computer for open ports

metaxploit = include_lib("/lib/metaxploit.so")
if not metaxploit then
    metaxploit = include_lib(current_path + "/metaxploit.so")
end if

if not metaxploit then
    exit("Error: Can't find metaxploit library")
end if

scan_address = function(address)
    ports = range(1, 65535)
    open_ports = []

    for port in ports
        // Try to connect to each port
        net_session = metaxploit.net_use(address, port)
        if net_session then
            open_ports.push(port)
            // Optional: try to get service version
            service_info = net_session.host_computer.get_service_info(port)
            print("Port " + port + " is open: " + service_info)
        end if
    end for

    return open_ports
end function

// Main program
print("Port Scanner Starting...")
target = user_input("Enter target IP: ")
if not is_valid_ip(target) then
    exit("Invalid IP address")
end if

print("Scanning " + target + "...")
open_ports = scan_address(target)

if open_ports.len == 0 then
    print("No open ports found")
else
    print("Found " + open_ports.len + " open ports")
    print(open_ports)
end if
"""
)

PASSWORD_CRACKER = Template(
    """// Grey Hack Password Cracker v1.0
// For game version ${version}
// Cracks passwords for various security systems

crypto = include_lib("/lib/crypto.so")
if not crypto then
    crypto = include_lib(current_path + "/crypto.so")
end if

if not crypto then
    exit("Error: Can't find crypto library")
end if

crack_password = function(hash, type)
    if not crypto.is_valid_password(hash) then
        return "Invalid password hash"
    end if

    wordlist = get_shell.host_computer.File("/usr/share/wordlists/common.txt")
    if not wordlist then
        print("Wordlist not found, using simple brute force")
        // Simple brute force for demo purposes
        password = crypto.aircrack(hash)
        return password
    else
        print("Using wordlist for cracking")
        words = wordlist.get_content.split("\\n")
        for word in words
            if crypto.hash(word) == hash then
                return word
            end if
        end for

        // If wordlist fails, try brute force
        print("Wordlist exhausted, trying brute force")
        password = crypto.aircrack(hash)
        return password
    end if
end function

// Main program
print("Password Cracker Starting...")
hash = user_input("Enter password hash: ")
hash_type = user_input("Enter hash type (or leave blank): ")

print("Cracking password...")
password = crack_password(hash, hash_type)

if password then
    print("Password cracked: " + password)
else
    print("Failed to crack password")
end if
"""
)

FILE_BROWSER = Template(
    """// Grey Hack File Browser v1.0
// For game version ${version}
// Browse and manipulate files on the system

browse_directory = function(path)
    computer = get_shell.host_computer
    files = computer.get_files(path)
    folders = computer.get_folders(path)

    print("Contents of " + path + ":")
    print("----------------------------")

    if folders.len > 0 then
        print("Directories:")
        for folder in folders
            print("📁 " + folder.name + "/")
        end for
        print("")
    end if

    if files.len > 0 then
        print("Files:")
        for file in files
            print("📄 " + file.name + " (" + file.size + " bytes)")
        end for
    end if

    print("----------------------------")
    return {"files": files, "folders": folders}
end function

file_details = function(file_path)
    computer = get_shell.host_computer
    file = computer.File(file_path)

    if not file then
        return "File not found: " + file_path
    end if

    details = {}
    details["name"] = file.name
    details["path"] = file.path
    details["size"] = file.size
    details["owner"] = file.owner
    details["group"] = file.group
    details["permissions"] = file.permissions

    return details
end function

// Main program
print("File Browser Starting...")
current_path = "/"

while true
    browse_result = browse_directory(current_path)

    print("\\nCurrent path: " + current_path)
    print("Commands: cd [dir], details [file], cat [file], exit")
    command = user_input("> ")

    if command == "exit" then
        break
    else if command.indexOf("cd ") == 0 then
        new_dir = command[3:]
        if new_dir == ".." then
            // Go up one directory
            parts = current_path.split("/")
            if parts.len > 1 then
                parts.pop
                current_path = parts.join("/")
                if current_path == "" then current_path = "/"
            end if
        else if new_dir.indexOf("/") == 0 then
            // Absolute path
            current_path = new_dir
        else
            // Relative path
            if current_path[-1:] != "/" then current_path = current_path + "/"
            current_path = current_path + new_dir
        end if
    else if command.indexOf("details ") == 0 then
        file_name = command[8:]
        if file_name.indexOf("/") == 0 then
            // Absolute path
            details = file_details(file_name)
        else
            // Relative path
            path = current_path
            if path[-1:] != "/" then path = path + "/"
            details = file_details(path + file_name)
        end if
        print(details)
    else if command.indexOf("cat ") == 0 then
        file_name = command[4:]
        path = ""

        if file_name.indexOf("/") == 0 then
            // Absolute path
            path = file_name
        else
            // Relative path
            path = current_path
            if path[-1:] != "/" then path = path + "/"
            path = path + file_name
        end if

        file = get_shell.host_computer.File(path)
        if file then
            print("Contents of " + file.name + ":")
            print("----------------------------")
            print(file.get_content)
            print("----------------------------")
        else
            print("File not found: " + path)
        end if
    else
        print("Unknown command: " + command)
    end if

    print("")
end while

print("File Browser Closed")
"""
)

SSH_TOOL = Template(
    """// Grey Hack SSH Tool v1.0
// For game version ${version}
// Connect to remote computers via SSH

connect_ssh = function(address, port, user, password)
    if not is_valid_ip(address) then
        return {"success": false, "message": "Invalid IP address"}
    end if

    if typeof(port) != "number" or port < 1 or port > 65535 then
        return {"success": false, "message": "Invalid port number"}
    end if

    // In versions 0.8.0+, using the new router API
    if "${version}" >= "0.8.0" then
        router = get_router
        if not router then
            return {"success": false, "message": "Cannot find router"}
        end if

        print("Connecting to " + address + ":" + port + "...")
        start_time = time
        remote_shell = router.connect_ssh(address, port, user, password)
    else
        // For older versions
        crypto = include_lib("/lib/crypto.so")
        if not crypto then
            return {"success": false, "message": "Cannot find crypto library"}
        end if

        print("Connecting to " + address + ":" + port + "...")
        remote_shell = crypto.connect_ssh(address, port, user, password)
    end if

    if not remote_shell then
        return {"success": false, "message": "SSH connection failed"}
    end if

    print("Connected to " + address + " as " + user)
    remote_computer = remote_shell.host_computer
    return {
        "success": true,
        "message": "Connected successfully",
        "shell": remote_shell,
        "computer": remote_computer
    }
end function

// Main program
print("SSH Connection Tool Starting...")
address = user_input("Target IP: ")
port = user_input("Port (default: 22): ").to_int
if not port then port = 22

user = user_input("Username: ")
password = user_input("Password: ")

result = connect_ssh(address, port, user, password)

if result.success then
    print("Connection established!")
    shell = result.shell
    computer = result.computer

    print("Connected to: " + computer.get_name)
    print("Type 'exit' to close the connection")

    while true
        command = user_input(user + "@" + computer.get_name + ":~$$ ")
        if command == "exit" then
            break
        end if

        output = shell.host_computer.terminal.execute(command)
        print(output)
    end while

    print("Connection closed")
else
    print("Connection failed: " + result.message)
end if
"""
)

CUSTOM = Template(
    """// Grey Hack Custom Script
// For game version ${version}
// ${header}

// Add your imports here
// Example:
// metaxploit = include_lib("/lib/metaxploit.so")
// crypto = include_lib("/lib/crypto.so")

// Add your functions here
custom_function = function()
    print("This is a custom function")
    return true
end function

// Main program
print("Custom Script Starting...")
print("Description: ${description}")

// Add your main code here
print("Hello, world!")
custom_function()

print("Custom Script Completed")
"""
)
